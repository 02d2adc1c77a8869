"""Sockets of two national standards and an adapter that joins them."""

from __future__ import annotations

ERROR_NO_SOCKET = "Error : No Sockeet Input"

AMERICAN_VOLTAGE = 110
CHINESE_VOLTAGE = 220


class BaseSocket:
    """A socket that works normally only when fed its rated voltage."""

    normal_message = "Socket Work Normal"
    warning_message = "Socket Work Warning"

    def __init__(self, rated_voltage: int) -> None:
        self.rated_voltage = rated_voltage
        self.current_voltage: int | None = None

    def set_current_voltage(self, voltage: int) -> None:
        self.current_voltage = voltage

    def do_work(self) -> bool:
        """Print how the socket copes with its voltage; return True if normal."""
        normal = self.current_voltage == self.rated_voltage
        print(self.normal_message if normal else self.warning_message)
        return normal


class AmericanSocket(BaseSocket):
    """A socket of the American standard, rated at 110 V."""

    normal_message = "American Socket Work Normal"
    warning_message = "American Socket Work Warning"

    def __init__(self) -> None:
        super().__init__(AMERICAN_VOLTAGE)

    def american_socket_input(self) -> str:
        return "Input American Standard Socket."


class ChineseSocket(BaseSocket):
    """A socket of the Chinese standard, rated at 220 V."""

    normal_message = "Chinese Socket Work Normal"
    # The warning deliberately reads the same as the normal message.
    warning_message = "Chinese Socket Work Normal"

    def __init__(self) -> None:
        super().__init__(CHINESE_VOLTAGE)

    def chinese_socket_input(self) -> str:
        return "Input Chinese Standard Socket."


class Adapter:
    """Lets a plug of one standard use a socket of the other.

    An American plug reaches the Chinese socket and a Chinese plug the
    American one; whatever voltage is supplied, each wrapped socket is fed
    its own rated voltage.
    """

    def __init__(
        self,
        chinese: ChineseSocket | None = None,
        american: AmericanSocket | None = None,
    ) -> None:
        self.chinese = chinese
        self.american = american

    def _sockets(self) -> list[BaseSocket]:
        return [s for s in (self.american, self.chinese) if s is not None]

    def american_socket_input(self) -> str:
        if self.chinese is None:
            return ERROR_NO_SOCKET
        return self.chinese.chinese_socket_input()

    def chinese_socket_input(self) -> str:
        if self.american is None:
            return ERROR_NO_SOCKET
        return self.american.american_socket_input()

    def set_current_voltage(self, voltage: int) -> None:
        """Convert the supplied voltage to each wrapped socket's rating."""
        for socket in self._sockets():
            socket.set_current_voltage(socket.rated_voltage)

    def do_work(self) -> bool:
        results = [socket.do_work() for socket in self._sockets()]
        return all(results)


def use_chinese_plug(socket) -> bool:
    """Plug a Chinese appliance into ``socket`` at 220 V."""
    socket.set_current_voltage(CHINESE_VOLTAGE)
    print(socket.chinese_socket_input())
    result = socket.do_work()
    print()
    return result


def use_american_plug(socket) -> bool:
    """Plug an American appliance into ``socket`` at 110 V."""
    socket.set_current_voltage(AMERICAN_VOLTAGE)
    print(socket.american_socket_input())
    result = socket.do_work()
    print()
    return result


def main(argv=None) -> int:
    american = AmericanSocket()
    chinese = ChineseSocket()
    adapter = Adapter(chinese=chinese, american=american)

    use_american_plug(american)
    use_chinese_plug(chinese)

    use_american_plug(adapter)
    use_chinese_plug(adapter)
    return 0