import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

DEFAULT_SERVICE_NAME = "api-service"


def log_level(name: Optional[str]) -> int:
    # unknown names fall back to INFO instead of failing the import
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


logger = logging.getLogger(__name__)
logger.setLevel(log_level(os.environ.get("LOG_LEVEL")))


@dataclass(frozen=True)
class Config:
    service_name: str = DEFAULT_SERVICE_NAME

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        # empty string counts as unset
        return cls(service_name=env.get("SERVICE_NAME") or DEFAULT_SERVICE_NAME)


CONFIG = Config.from_env()


# ---- Helpers -----------------------------------------------------------------

def resp(status: int, body: Any):
    headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    }
    return {"statusCode": status, "headers": headers, "body": json.dumps(body)}


def iso(dt: datetime) -> str:
    # Zulu, millisecond precision
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def echo_event(event: Any) -> Dict[str, Any]:
    # direct invokes may send any JSON value; only mappings carry fields
    event = event if isinstance(event, Mapping) else {}
    return {
        "httpMethod": event.get("httpMethod"),
        "path": event.get("rawPath"),
        "headers": event.get("headers"),
    }


def build_response(event, config: Config, now: Optional[datetime] = None):
    body = {
        "message": "Hello from Lambda!",
        "service": config.service_name,
        "timestamp": iso(now or datetime.now(timezone.utc)),
        "event": echo_event(event),
    }
    return resp(200, body)


# ---- Entry point -------------------------------------------------------------

def handler(event, context):
    """
    Lambda proxy handler behind API Gateway.
    Describes itself: service name, invocation time and the inbound
    method, path and headers. `context` is not used.
    """
    echoed = echo_event(event)
    logger.info("Invoked: method=%s path=%s", echoed["httpMethod"], echoed["path"])
    response = build_response(event, CONFIG)
    logger.debug("Response body: %s", response["body"])
    return response
