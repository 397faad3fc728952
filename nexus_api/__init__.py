from . import analytics, auth, notifications, projects, tasks, team
from .client import NexusClient
from .config import BASE_URL, ClientConfig, load_config
from .errors import (
    ApiResponseError,
    ConfigError,
    RequestEncodeError,
    RequestFailure,
    ResponseDecodeError,
    TransportError,
)
from .models import ApiRequest, HttpMethod
