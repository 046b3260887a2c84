# kura_translator/translation/decoder.py
import logging
from typing import Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import DecodingError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class KuraModel(BaseModel):
    """Base for device-side body shapes; unknown fields are dropped."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _decode_text(body: bytes, charset: str) -> str:
    if body is None:
        raise DecodingError("No body to decode", body)
    try:
        return body.decode(charset)
    except LookupError as e:
        raise DecodingError(f"Unknown charset '{charset}'", body) from e
    except UnicodeDecodeError as e:
        raise DecodingError(f"Body is not valid {charset}: {e}", body) from e


def read_json_body_as(body: bytes, shape: Type[T], charset: str = "utf-8") -> T:
    """
    Decode a JSON body into ``shape``.

    Validation is strict: values are never coerced between types, required
    fields must be present and unknown fields are dropped.

    Raises:
        DecodingError: carrying the offending bytes, on any mismatch
    """
    text = _decode_text(body, charset)
    try:
        item = shape.model_validate_json(text, strict=True)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in e.errors()
        )
        logger.debug(f"Body does not match {shape.__name__}: {problems}")
        raise DecodingError(f"Body does not match {shape.__name__}: {problems}", body) from e
    logger.debug(f"Decoded {len(body)} byte body as {shape.__name__}")
    return item


def read_text_body(body: bytes, charset: str = "utf-8") -> str:
    """Decode a plain text body."""
    return _decode_text(body, charset)


def encode_json_body(item: BaseModel, charset: str = "utf-8") -> bytes:
    """Encode ``item`` the way the device sends it: wire field names, only the fields that were set."""
    return item.model_dump_json(by_alias=True, exclude_unset=True).encode(charset)
