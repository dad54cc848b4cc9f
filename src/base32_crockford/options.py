"""
CodecOptions — Конфигурация вызова encode/decode

Immutable Pydantic модель. Валидируется один раз на границе вызова.
Внешние данные (dict из JSON/конфига) сначала проверяются JSON Schema
контрактом contracts/schema/codec_options.json, затем моделью.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from base32_crockford.contracts import validate_codec_options
from base32_crockford.errors import InvalidInputError


# =============================================================================
# OPTIONS MODEL
# =============================================================================


class CodecOptions(BaseModel):
    """
    Опции кодека.

    - checksum: encode добавляет check symbol, decode проверяет последний символ
    - partitions: число групп через дефис (только encode); 0 и 1 отключают разбиение
    """

    checksum: bool = Field(False, description="Добавлять/проверять check symbol (mod 37)")
    partitions: int = Field(1, ge=0, description="Число групп через дефис")

    model_config = {"frozen": True, "extra": "forbid", "strict": True}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CodecOptions":
        """
        Построение опций из внешнего dict.

        Все нарушения JSON Schema перечисляются в одном сообщении.

        Raises:
            InvalidInputError: данные не проходят JSON Schema или модель
        """
        payload = dict(data)
        errors = validate_codec_options(payload)
        if errors:
            raise InvalidInputError(f"invalid codec options: {'; '.join(errors)}")
        return _build(payload)

    def with_overrides(
        self,
        checksum: Optional[bool] = None,
        partitions: Optional[int] = None,
    ) -> "CodecOptions":
        """Новый экземпляр с заменой явно переданных полей (None = не менять)."""
        if checksum is None and partitions is None:
            return self

        payload = self.model_dump()
        if checksum is not None:
            payload["checksum"] = checksum
        if partitions is not None:
            payload["partitions"] = partitions
        return _build(payload)


DEFAULT_OPTIONS = CodecOptions()


def _build(payload: Mapping[str, Any]) -> CodecOptions:
    try:
        return CodecOptions(**payload)
    except ValidationError as e:
        raise InvalidInputError(f"invalid codec options: {e}") from e


def resolve_options(
    options: Union[CodecOptions, Mapping[str, Any], None] = None,
    checksum: Optional[bool] = None,
    partitions: Optional[int] = None,
) -> CodecOptions:
    """
    Приведение аргументов публичного API к CodecOptions.

    Keyword-переопределения имеют приоритет над объектом опций.

    Raises:
        InvalidInputError: невалидные опции или неподдерживаемый тип options
    """
    if options is None:
        resolved = DEFAULT_OPTIONS
    elif isinstance(options, CodecOptions):
        resolved = options
    elif isinstance(options, Mapping):
        resolved = CodecOptions.from_mapping(options)
    else:
        raise InvalidInputError(
            f"options must be CodecOptions or a mapping, got {type(options).__name__}"
        )
    return resolved.with_overrides(checksum=checksum, partitions=partitions)
