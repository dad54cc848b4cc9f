"""
Contract Validation Module

JSON Schema контракты для внешней конфигурации кодека.
"""

from .validators import (
    CodecOptionsValidator,
    ContractValidator,
    SchemaLoader,
    validate_codec_options,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CodecOptionsValidator",
    # Functions
    "validate_codec_options",
]
