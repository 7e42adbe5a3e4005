from dataclasses import dataclass, field


# fmt: off
@dataclass(frozen=True)
class ShortLinkModel:
    code: str                           # Unique short identifier (record key)
    long_url: str                       # Original long URL the short code redirects to


@dataclass(frozen=True)
class Request:
    method: str                                             # Upper-cased HTTP method
    path: str                                               # Raw request path
    headers: dict[str, str] = field(default_factory=dict)   # Header names are lower-cased
    body: str | None = None                                 # Decoded request body
# fmt: on
