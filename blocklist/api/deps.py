from fastapi import Request
from pydantic import TypeAdapter, ValidationError

from blocklist.db.store import DomainStore
from blocklist.errors import InvalidPayloadError, UnsupportedMediaTypeError

JSON_MEDIA_TYPE = "application/json"
INVALID_JSON_MESSAGE = "Expected array of strings; got invalid JSON."

_domain_list = TypeAdapter(list[str])


def get_store(request: Request) -> DomainStore:
    """Return the store the running app was built with."""
    return request.app.state.store


def ensure_json(request: Request) -> None:
    """Reject bodies whose media type isn't application/json (parameters like charset are ignored)."""
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise UnsupportedMediaTypeError(
            f'Expected content of type "{JSON_MEDIA_TYPE}", got: "{content_type}".'
        )


async def read_domain_batch(request: Request) -> list[str]:
    """
    Decode the request body as a JSON array of strings.

    Raises:
        UnsupportedMediaTypeError: If the content type isn't JSON
        InvalidPayloadError: If the body isn't a JSON array of strings
    """
    ensure_json(request)
    body = await request.body()
    try:
        return _domain_list.validate_json(body)
    except ValidationError as e:
        raise InvalidPayloadError(INVALID_JSON_MESSAGE) from e
