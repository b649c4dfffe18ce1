import hmac
from typing import Optional

from az_analyze_image.errors import SecretZeroizedError

REDACTED_SECRET_REPR = "Secret(***)"


class Secret:
    """Holder for a sensitive string such as a subscription key.

    - `repr()`, `str()` and `format()` always yield `Secret(***)`, whatever
      the format spec.
    - Equality is evaluated with `hmac.compare_digest` over the UTF-8 bytes, so
      the time taken does not depend on the position of the first mismatch.
      A zeroized secret is equal to no secret, itself included.
    - The value lives in a mutable buffer that `zeroize()` overwrites with
      zeros. `close()`, leaving a `with` block and garbage collection all call
      it.

    Strings returned by `value()` are ordinary immutable `str` objects that
    cannot be wiped; callers should not keep them around.
    """

    def __init__(self, value: str):
        self.__buffer: Optional[bytearray] = None
        self.__buffer = bytearray(value.encode("utf-8"))

    def value(self) -> str:
        if self.__buffer is None:
            raise SecretZeroizedError("Secret value was already zeroized.")
        return self.__buffer.decode("utf-8")

    @property
    def zeroized(self) -> bool:
        return self.__buffer is None

    def zeroize(self) -> None:
        buffer = self.__buffer
        if buffer is None:
            return None
        for index in range(len(buffer)):
            buffer[index] = 0
        self.__buffer = None

    def close(self) -> None:
        self.zeroize()

    def __enter__(self) -> "Secret":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.zeroize()

    def __del__(self) -> None:
        self.zeroize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        if self.__buffer is None or other.__buffer is None:
            return False
        return hmac.compare_digest(self.__buffer, other.__buffer)

    __hash__ = None

    def __repr__(self) -> str:
        return REDACTED_SECRET_REPR

    def __str__(self) -> str:
        return REDACTED_SECRET_REPR

    def __format__(self, format_spec: str) -> str:
        return REDACTED_SECRET_REPR

    def __reduce__(self):
        raise TypeError("Secret instances cannot be pickled.")
