# === FILE: site_rag/config.py ===
"""
Loading and validation of SiteRAG configuration.

The crawl/index/model settings live in a YAML or JSON file described by
:class:`RagConfig` (pydantic). Service credentials never go into that file:
they are read from the environment (and an optional ``.env``) by
:func:`load_credentials`.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union
from urllib.parse import urlparse

import yaml
from dotenv import load_dotenv
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
)

__all__ = ["RagConfig", "Credentials", "load_config", "load_credentials"]


class RagConfig(BaseModel):
    """Settings for one ingestion or question-answering run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: HttpUrl = Field(..., description="Crawl seed; every in-scope link must start with it.")
    base_domain: Optional[str] = Field(None, description="Hostname restriction, derived from base_url if omitted.")
    chunk_size: int = Field(1000, ge=1, description="Words per body chunk.")
    top_k: int = Field(1, ge=1, description="Nearest records used to build the prompt.")
    traversal: Literal["depth", "breadth"] = Field("depth", description="Worklist policy.")
    max_pages: Optional[int] = Field(None, ge=1, description="Optional cap on ingested pages.")
    timeout: Optional[float] = Field(None, gt=0, description="Optional per-request timeout (seconds).")
    user_agent: str = Field("SiteRAGBot/1.0", min_length=1, description="User-Agent header.")

    collection: str = Field("WEB_SCRAPED_DATA_COLLECTION", min_length=1)
    chroma_host: str = Field("localhost", min_length=1)
    chroma_port: int = Field(8000, ge=1, le=65535)

    embed_model: str = Field("embed-english-v3.0", min_length=1)
    chat_model: str = Field("command-r-plus", min_length=1)

    @field_validator("base_domain", mode="before")
    def _lower_domain(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower() or None
        return v

    @property
    def seed_url(self) -> str:
        return str(self.base_url)

    @property
    def domain(self) -> str:
        """Hostname every in-scope link must have."""
        return self.base_domain or (urlparse(self.seed_url).hostname or "")


class Credentials(BaseModel):
    """Secrets for the hosted services, never written to disk by SiteRAG."""
    model_config = ConfigDict(frozen=True)

    cohere_api_key: Optional[str] = None

    def require_cohere(self) -> str:
        if not self.cohere_api_key:
            raise RuntimeError("COHERE_API_KEY is not set")
        return self.cohere_api_key


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> RagConfig:
    """
    Read a YAML or JSON file and return a validated :class:`RagConfig`.
    Raises FileNotFoundError when the file does not exist.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return RagConfig(**data)


def load_credentials(env_file: Union[str, Path, None] = None) -> Credentials:
    """Load ``.env`` (if any) into the environment and collect service keys."""
    load_dotenv(dotenv_path=env_file)
    return Credentials(cohere_api_key=os.getenv("COHERE_API_KEY"))
