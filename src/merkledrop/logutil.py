import logging
import re
from typing import Iterable


_FELT_HEX = re.compile(r"0x([0-9a-fA-F]{6})[0-9a-fA-F]{52}([0-9a-fA-F]{6})\b")


class HexShorteningFilter(logging.Filter):
    """Abbreviate 64-digit hex field elements so tree dumps stay readable."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        short = _FELT_HEX.sub(r"0x\1..\2", msg)
        if short != msg:
            record.msg = short
            record.args = None
        return True


def setup_logging(
    level: int = logging.INFO,
    loggers: Iterable[str] = ("merkledrop.api", "merkledrop.merkle", "merkledrop_cli"),
) -> None:
    logging.basicConfig(level=level)
    f = HexShorteningFilter()
    for name in loggers:
        lg = logging.getLogger(name)
        lg.setLevel(level)
        lg.addFilter(f)
