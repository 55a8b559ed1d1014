"""
Key reader - single keypresses from the controlling terminal

The terminal is switched to raw mode for exactly one read and restored
before returning, whatever happens during the read.
"""

import logging
import os

from loggit_cli.utils.errors import TerminalError

if os.name == 'nt':
    import msvcrt
else:
    import termios
    import tty

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"
READ_SIZE = 3

KEY_NONE = 0
KEY_CTRL_C = 3
KEY_LINEFEED = 10
KEY_ENTER = 13
KEY_ESC = 27
KEY_CSI = 91
KEY_SPACE = 32
KEY_UP = 65
KEY_DOWN = 66
KEY_RIGHT = 67
KEY_LEFT = 68

ENTER_KEYS = frozenset({KEY_ENTER, KEY_LINEFEED})

_WINDOWS_ARROWS = {
    b'H': KEY_UP,
    b'P': KEY_DOWN,
    b'M': KEY_RIGHT,
    b'K': KEY_LEFT,
}


def decode_key(data: bytes) -> int:
    """
    Reduce up to three raw bytes to a single key code.

    ``ESC [ X`` is an arrow key and yields ``X``. Anything else yields its
    first byte. No bytes at all yields KEY_NONE.
    """
    if len(data) >= 3 and data[0] == KEY_ESC and data[1] == KEY_CSI:
        return data[2]
    if data:
        return data[0]
    return KEY_NONE


def is_enter(key: int) -> bool:
    return key in ENTER_KEYS


def is_letter(key: int, letter: str) -> bool:
    return key == ord(letter)


def read_key() -> int:
    """
    Block until one key is pressed and return its code.

    Raises:
        TerminalError: If the terminal cannot be opened, put into raw mode,
            read, or restored
        KeyboardInterrupt: On Ctrl+C, after the terminal is restored
    """
    if os.name == 'nt':
        key = _read_windows_key()
    else:
        key = _read_posix_key()

    if key == KEY_CTRL_C:
        raise KeyboardInterrupt()
    return key


def _read_posix_key() -> int:
    try:
        fd = os.open(TTY_PATH, os.O_RDWR)
    except OSError as e:
        raise TerminalError(f"Cannot open {TTY_PATH}: {e}") from e

    try:
        try:
            saved = termios.tcgetattr(fd)
        except termios.error as e:
            raise TerminalError(f"Cannot read terminal mode: {e}") from e

        try:
            tty.setraw(fd)
            data = os.read(fd, READ_SIZE)
        except (OSError, termios.error) as e:
            raise TerminalError(f"Cannot read key in raw mode: {e}") from e
        finally:
            try:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            except termios.error as e:
                logger.error(f"Failed to restore terminal mode: {e}")
                raise TerminalError(f"Cannot restore terminal mode: {e}") from e
    finally:
        os.close(fd)

    key = decode_key(data)
    logger.debug(f"Read key {key} from {data!r}")
    return key


def _read_windows_key() -> int:
    try:
        ch = msvcrt.getch()
        if ch in (b'\x00', b'\xe0'):
            return _WINDOWS_ARROWS.get(msvcrt.getch(), KEY_NONE)
    except OSError as e:
        raise TerminalError(f"Cannot read key from console: {e}") from e
    return ch[0] if ch else KEY_NONE
