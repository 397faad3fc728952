from dataclasses import dataclass, field
from typing import Any, Optional

from requests.structures import CaseInsensitiveDict


class HttpMethod:
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass
class ApiRequest:
    method: str
    url: str
    endpoint: str
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: Optional[Any] = None
    params: Optional[dict] = None
