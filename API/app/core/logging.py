import logging
import re
import sys
from typing import Any

DOMAIN_CURRICULUM = "curriculum"
DOMAIN_PLANNING = "planning"
DOMAIN_SCHEDULING = "scheduling"
DOMAIN_LLM = "llm"
DOMAIN_PERSISTENCE = "persistence"

LOG_FORMAT = "%(asctime)s | %(levelname)s | [%(domain)s] | %(name)s | %(message)s%(context)s"

# Third-party loggers that log full request URLs or driver chatter at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "pymongo")


class DomainLogger(logging.LoggerAdapter):
    """Tags records with a domain and the bound key=value context rendered after the message."""

    def __init__(self, logger: logging.Logger, domain: str, context: dict[str, Any] | None = None):
        super().__init__(logger, {"domain": domain})
        self.domain = domain
        self.context = dict(context or {})

    def bind(self, **context: Any) -> "DomainLogger":
        return DomainLogger(self.logger, self.domain, {**self.context, **context})

    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra["domain"] = self.domain
        extra["context"] = "".join(f" {key}={value}" for key, value in self.context.items())
        return msg, kwargs


def get_domain_logger(name: str, domain: str, **context: Any) -> DomainLogger:
    return DomainLogger(logging.getLogger(name), domain, context)


class DomainDefaultFilter(logging.Filter):
    """Records from third-party loggers have no domain; give them one so the format never fails."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "domain"):
            record.domain = "app"  # type: ignore[attr-defined]
        if not hasattr(record, "context"):
            record.context = ""  # type: ignore[attr-defined]
        return True


_SECRET_PATTERNS = [
    # OpenRouter keys look like sk-or-v1-...
    re.compile(r"(?i)(bearer\s+)(sk-[^\s,;\"']+)"),
    re.compile(r"(?i)(openrouter_api_key\s*[=:]\s*)([^\s,;]+)"),
    re.compile(r"(?i)(authorization\s*[=:]\s*)([^\s,;]+(?:\s+[^\s,;]+)?)"),
    re.compile(r"(mongodb(?:\+srv)?://)([^/@\s]+)(?=@)"),
]


def redact_secrets(message: str) -> str:
    text = str(message or "")
    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(r"\1[REDACTED]", text)
    return text


class SecretRedactionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact_secrets(record.getMessage())
        record.args = ()
        return True


class SuppressAccessPathFilter(logging.Filter):
    """Drop successful uvicorn access lines for polling endpoints."""

    def __init__(self, paths: tuple[str, ...] = ("/health",)):
        super().__init__()
        self.paths = paths

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not (" 200" in msg and any(f"{path} " in msg for path in self.paths))


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name("learnpath")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(DomainDefaultFilter())
    handler.addFilter(SecretRedactionFilter())

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == "learnpath"]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").addFilter(SuppressAccessPathFilter())
