"""
csvdecode core library.

This package contains the core functionality:
- result: Ok/Err result values shared by every layer
- parser: CSV grammar parsing into a Document
- decoder: Decoder combinators and batch decoding
- schema: YAML-described row layouts compiled into decoders
"""

__all__: list[str] = []
