from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds a single exchange can end with."""

    TIMEOUT_NO_RESPONSE = "timeout_no_response"
    PROTOCOL_VIOLATION = "protocol_violation"
    TRANSPORT_FAILURE = "transport_failure"


def bilingual_message(ru: str, en: str) -> str:
    return f"RU: {ru} | EN: {en}"


class OfdNetworkError(Exception):
    """
    A classified exchange failure.

    `kind` is the discriminator; callers are expected to match on it rather
    than subclass. `cause` is the low-level exception, when there is one.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"OfdNetworkError(kind={self.kind.name}, message={self.message!r})"


def timeout_no_response(timeout_ms: int, *, cause: BaseException | None = None) -> OfdNetworkError:
    return OfdNetworkError(
        ErrorKind.TIMEOUT_NO_RESPONSE,
        bilingual_message(
            f"Нет ответа от сервера за {timeout_ms}мс",
            f"No response from server in {timeout_ms}ms",
        ),
        cause=cause,
    )


def protocol_violation(ru: str, en: str) -> OfdNetworkError:
    return OfdNetworkError(ErrorKind.PROTOCOL_VIOLATION, bilingual_message(ru, en))


def transport_failure(cause: BaseException) -> OfdNetworkError:
    name = type(cause).__name__
    detail = str(cause)
    return OfdNetworkError(
        ErrorKind.TRANSPORT_FAILURE,
        bilingual_message(
            f"Транспортная ошибка: {name}: {detail or 'нет подробностей'}",
            f"Transport failure: {name}: {detail or 'no details'}",
        ),
        cause=cause,
    )


def request_too_short(size: int, header_size: int) -> OfdNetworkError:
    return protocol_violation(
        f"Размер запроса {size} меньше размера заголовка {header_size}",
        f"Request size {size} is smaller than header size {header_size}",
    )


def message_too_short(total_size: int, header_size: int) -> OfdNetworkError:
    return protocol_violation(
        f"Размер сообщения {total_size} меньше размера заголовка {header_size}",
        f"Message size {total_size} is smaller than header size {header_size}",
    )


def message_too_large(total_size: int, limit: int) -> OfdNetworkError:
    return protocol_violation(
        f"Размер сообщения {total_size} превышает {limit}",
        f"Message size {total_size} exceeds {limit}",
    )


def closed_before(part_ru: str, part_en: str) -> OfdNetworkError:
    return protocol_violation(
        f"Сервер закрыл соединение до полного чтения: {part_ru}",
        f"Server closed connection before full {part_en} was received",
    )
