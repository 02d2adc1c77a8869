import pytest

from patternkit.adapter import (
    ERROR_NO_SOCKET,
    Adapter,
    AmericanSocket,
    BaseSocket,
    ChineseSocket,
    main,
    use_american_plug,
    use_chinese_plug,
)


def test_base_socket_normal_at_rated_voltage(capsys):
    socket = BaseSocket(50)
    socket.set_current_voltage(50)
    assert socket.do_work() is True
    assert capsys.readouterr().out == "Socket Work Normal\n"


def test_base_socket_warning_off_rating(capsys):
    socket = BaseSocket(50)
    socket.set_current_voltage(60)
    assert socket.do_work() is False
    assert capsys.readouterr().out == "Socket Work Warning\n"


def test_unset_voltage_is_a_warning(capsys):
    socket = AmericanSocket()
    assert socket.do_work() is False
    assert capsys.readouterr().out == "American Socket Work Warning\n"


def test_socket_ratings():
    assert AmericanSocket().rated_voltage == 110
    assert ChineseSocket().rated_voltage == 220


def test_american_socket_wrong_voltage(capsys):
    socket = AmericanSocket()
    socket.set_current_voltage(220)
    assert socket.do_work() is False
    assert capsys.readouterr().out == "American Socket Work Warning\n"


def test_chinese_socket_warning_reads_as_normal(capsys):
    socket = ChineseSocket()
    socket.set_current_voltage(110)
    assert socket.do_work() is False
    assert capsys.readouterr().out == "Chinese Socket Work Normal\n"


def test_use_chinese_plug_on_chinese_socket(capsys):
    assert use_chinese_plug(ChineseSocket()) is True
    out = capsys.readouterr().out
    assert out == "Input Chinese Standard Socket.\nChinese Socket Work Normal\n\n"


def test_use_american_plug_on_american_socket(capsys):
    assert use_american_plug(AmericanSocket()) is True
    out = capsys.readouterr().out
    assert out == "Input American Standard Socket.\nAmerican Socket Work Normal\n\n"


def test_adapter_crosses_inputs():
    adapter = Adapter(chinese=ChineseSocket(), american=AmericanSocket())
    assert adapter.american_socket_input() == "Input Chinese Standard Socket."
    assert adapter.chinese_socket_input() == "Input American Standard Socket."


@pytest.mark.parametrize(
    "adapter",
    [Adapter(chinese=ChineseSocket()), Adapter(american=AmericanSocket())],
)
def test_adapter_missing_side_reports_error(adapter):
    inputs = {adapter.american_socket_input(), adapter.chinese_socket_input()}
    assert ERROR_NO_SOCKET in inputs


def test_adapter_converts_voltage_to_ratings():
    american = AmericanSocket()
    chinese = ChineseSocket()
    adapter = Adapter(chinese=chinese, american=american)
    adapter.set_current_voltage(999)
    assert american.current_voltage == american.rated_voltage
    assert chinese.current_voltage == chinese.rated_voltage


def test_american_plug_through_adapter(capsys):
    adapter = Adapter(chinese=ChineseSocket(), american=AmericanSocket())
    assert use_american_plug(adapter) is True
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Input Chinese Standard Socket."
    assert "American Socket Work Warning" not in lines


def test_main_returns_zero(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "Input American Standard Socket." in out
    assert "Input Chinese Standard Socket." in out