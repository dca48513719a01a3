"""Raw serial port access over POSIX terminal devices."""

from __future__ import annotations

import fcntl
import glob
import logging
import os
import termios
import time
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

_IO_TIMEOUT = 0.2
_RESTART_INTERVAL = 0.2

_BAUD_RATES = {
    2400: termios.B2400,
    4800: termios.B4800,
    9600: termios.B9600,
    115200: termios.B115200,
}


class SerialType(Enum):
    """Families of serial device nodes under /dev."""

    TTY_USB = "ttyUSB"
    TTY_CH343USB = "ttyCH343USB"
    TTY_THS = "ttyTHS"
    TTY_ACM = "ttyACM"

    @property
    def pattern(self) -> str:
        return f"/dev/{self.value}*"


class SerialError(Exception):
    """Raised when a serial port cannot be found, opened, read or written."""


@dataclass(frozen=True)
class SerialConfig:
    """Device path and line settings of a serial port.

    ``parity`` is ``"O"`` (odd), ``"E"`` (even) or ``"N"`` (none). Baud rates
    other than 2400, 4800, 9600 and 115200 fall back to 9600.
    """

    name: str
    baudrate: int = 115200
    parity: str = "N"
    data_bits: int = 8
    stop_bits: int = 1


def list_serial_ports(kind):
    """Return the sorted device paths of the given serial type."""
    ports = sorted(glob.glob(SerialType(kind).pattern))
    if not ports:
        logger.error("Serial port not found")
        raise SerialError(f"no serial port matches {SerialType(kind).pattern}")
    logger.info("Serial port found")
    return ports


def _build_attributes(config: SerialConfig) -> list:
    """Return raw-mode terminal attributes for ``config``."""
    iflag = 0
    cflag = termios.CLOCAL | termios.CREAD
    if config.data_bits == 7:
        cflag |= termios.CS7
    elif config.data_bits == 8:
        cflag |= termios.CS8

    if config.parity == "O":
        cflag |= termios.PARENB | termios.PARODD
        iflag |= termios.INPCK | termios.ISTRIP
    elif config.parity == "E":
        cflag |= termios.PARENB
        iflag |= termios.INPCK | termios.ISTRIP

    if config.stop_bits == 2:
        cflag |= termios.CSTOPB

    speed = _BAUD_RATES.get(config.baudrate, termios.B9600)
    control_chars = [0] * termios.NCCS
    control_chars[termios.VTIME] = 0
    control_chars[termios.VMIN] = 0
    return [iflag, 0, cflag, 0, speed, speed, control_chars]


class SerialPort:
    """A serial port in raw mode, optionally reopened when I/O fails."""

    def __init__(self, config, auto_restart=False):
        self.config = config
        self.auto_restart = auto_restart
        self.fd = None

    @property
    def is_open(self) -> bool:
        return self.fd is not None

    def open(self):
        """Open and configure the device; return the port."""
        name = self.config.name
        try:
            fd = os.open(name, os.O_RDWR | os.O_NOCTTY | os.O_NDELAY)
        except OSError as exc:
            logger.error("Serial port open failed")
            raise SerialError(f"cannot open serial port {name}") from exc
        try:
            fcntl.fcntl(fd, fcntl.F_SETFL, 0)
            termios.tcgetattr(fd)
            termios.tcflush(fd, termios.TCIFLUSH)
            termios.tcsetattr(fd, termios.TCSANOW, _build_attributes(self.config))
        except (OSError, termios.error) as exc:
            os.close(fd)
            logger.error("Serial port configuration failed")
            raise SerialError(f"cannot configure serial port {name}") from exc
        self.fd = fd
        return self

    def close(self):
        """Close the device if it is open."""
        if self.fd is not None:
            try:
                os.close(self.fd)
            except OSError:
                pass
            self.fd = None
        logger.warning("Serial port closed")

    def restart(self):
        """Reopen the device, retrying until it opens or its path disappears."""
        logger.warning("Serial port trying to restart")
        while True:
            if not os.path.exists(self.config.name):
                logger.error("Serial port restart failed : name error")
                raise SerialError(f"serial port {self.config.name} does not exist")
            self.close()
            try:
                self.open()
            except SerialError:
                time.sleep(_RESTART_INTERVAL)
                continue
            logger.info("Serial port restart success")
            return self

    def _ensure_open(self, action: str) -> None:
        if self.fd is not None:
            return
        logger.error("Serial port %s failed : invalid file descriptor", action)
        if not self.auto_restart:
            raise SerialError(f"serial port is not open for {action}")
        self.restart()

    def read(self, length):
        """Read exactly ``length`` bytes, failing after the I/O timeout."""
        if length < 0:
            raise ValueError("length must not be negative")
        self._ensure_open("read")
        received = bytearray()
        start = time.monotonic()
        while len(received) < length:
            try:
                chunk = os.read(self.fd, length - len(received))
                failed = False
            except OSError:
                chunk, failed = b"", True
            if failed or time.monotonic() - start > _IO_TIMEOUT:
                logger.error("Serial port read failed : read error")
                if self.auto_restart:
                    self.restart()
                    start = time.monotonic()
                    continue
                self.close()
                raise SerialError("serial port read failed")
            received += chunk
        return bytes(received)

    def write(self, data):
        """Write all of ``data``, failing after the I/O timeout; return its length."""
        payload = bytes(data)
        self._ensure_open("write")
        sent = 0
        start = time.monotonic()
        while sent < len(payload):
            try:
                count = os.write(self.fd, payload[sent:])
                failed = False
            except OSError:
                count, failed = 0, True
            if failed or time.monotonic() - start > _IO_TIMEOUT:
                logger.error("Serial port write failed : write error")
                if self.auto_restart:
                    self.restart()
                    start = time.monotonic()
                    continue
                self.close()
                raise SerialError("serial port write failed")
            sent += count
        return len(payload)

    def init_head(self, struct_size, sof):
        """Align the stream to frames of ``struct_size`` bytes after a ``sof`` byte.

        Returns how many bytes were skipped to reach the frame boundary.
        """
        frame_size = struct_size + 1
        try:
            header = self.read(2 * frame_size)
        except SerialError as exc:
            logger.error("Serial port head failed to find")
            raise SerialError("cannot read serial frame header") from exc
        starts = [
            index
            for index in range(frame_size)
            if header[index] == sof and header[index + frame_size] == sof
        ]
        if not starts:
            logger.error("Serial port init head failed : header not found")
            raise SerialError("serial frame header not found")
        start = starts[-1]
        try:
            self.read(start)
        except SerialError as exc:
            logger.error("Serial port init head failed : read error while aheading")
            raise SerialError("cannot skip to serial frame header") from exc
        return start

    def __enter__(self):
        if self.fd is None:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False