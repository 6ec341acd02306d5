from __future__ import annotations

import platform
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version

import httpx

try:
    _LIBRARY_VERSION = version("checkout-connector")
except PackageNotFoundError:  # running from a source checkout
    _LIBRARY_VERSION = "0.0.0"


@dataclass(frozen=True)
class UserAgentField:
    key: str
    name: str
    version: str
    options: tuple[str, ...] = ()

    def __str__(self) -> str:
        text = f"{self.key}/{self.name}_{self.version}"
        if self.options:
            text = f"{text} ({' ; '.join(self.options)})"
        return text


@dataclass
class UserAgent:
    """User-Agent header value identifying the client to the remote API.

    Rendered as space-separated ``Key/Name_Version (opt ; opt)`` fields,
    starting with the library, operating system and language fields.
    Integrations append their own field with :meth:`add_field`.
    """

    fields: list[UserAgentField] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.fields:
            self.fields = [
                UserAgentField("Library", "checkout_connector", _LIBRARY_VERSION),
                UserAgentField("OS", platform.system(), platform.release()),
                UserAgentField(
                    "Language",
                    "Python",
                    platform.python_version(),
                    (platform.python_implementation(), f"httpx_{httpx.__version__}"),
                ),
            ]

    def add_field(
        self,
        key: str,
        name: str,
        version: str,
        options: tuple[str, ...] | list[str] = (),
    ) -> None:
        """Append a field.

        Raises:
            ValueError: if a field with *key* is already present.
        """
        if any(existing.key == key for existing in self.fields):
            raise ValueError(f"Unable to redefine field {key}")
        self.fields.append(UserAgentField(key, name, version, tuple(options)))

    def __str__(self) -> str:
        return " ".join(str(f) for f in self.fields)
