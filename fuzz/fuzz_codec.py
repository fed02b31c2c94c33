"""Fuzz the field-element codec: arbitrary text must parse or raise cleanly."""
from __future__ import annotations
import atheris
import sys

with atheris.instrument_imports():
    from merkledrop.errors import AddressParseError, DataParseError
    from merkledrop.felt import FIELD_PRIME, parse_address, parse_data_item, to_hex


def TestOneInput(data: bytes):  # noqa: N802
    text = atheris.FuzzedDataProvider(data).ConsumeUnicodeNoSurrogates(80)
    try:
        fe = parse_address(text)
    except AddressParseError:
        pass
    else:
        if not 0 <= fe < FIELD_PRIME or len(to_hex(fe)) != 66:
            raise RuntimeError("address outside field")
    try:
        parse_data_item(text)
    except DataParseError:
        pass


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
