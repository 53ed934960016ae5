import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Snapshot imutável da configuração, válido para um único request."""

    patterns: Tuple[str, ...]
    ref: str
    slack: str
    port: int


def _parse_port(value: Any) -> int:
    # Aceita número JSON ou string numérica ("8080"), como o json.Number original
    if isinstance(value, bool):
        raise ConfigError(f"Campo 'port' inválido: {value!r}")
    if isinstance(value, int):
        port = value
    elif isinstance(value, str) and value.strip().isdigit():
        port = int(value.strip())
    else:
        raise ConfigError(f"Campo 'port' inválido: {value!r}")
    if not 0 < port < 65536:
        raise ConfigError(f"Campo 'port' fora do intervalo: {port}")
    return port


def parse_config(data: Dict[str, Any]) -> Config:
    if not isinstance(data, dict):
        raise ConfigError("Configuração deve ser um objeto JSON")

    missing = [key for key in ('patterns', 'ref', 'slack', 'port') if key not in data]
    if missing:
        raise ConfigError(f"Campos ausentes na configuração: {', '.join(missing)}")

    patterns = data['patterns']
    if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
        raise ConfigError("Campo 'patterns' deve ser uma lista de strings")

    ref = data['ref']
    if not isinstance(ref, str) or not ref:
        raise ConfigError("Campo 'ref' deve ser uma string não vazia")

    slack = data['slack']
    if not isinstance(slack, str) or not slack:
        raise ConfigError("Campo 'slack' deve ser uma string não vazia")

    return Config(
        patterns=tuple(patterns),
        ref=ref,
        slack=slack,
        port=_parse_port(data['port']),
    )


def load_config(file_path: str) -> Config:
    """
    Lê e valida o arquivo de configuração JSON.
    Chamado a cada request para que alterações nos padrões entrem em vigor sem restart.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as fp:
            raw = fp.read()
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Falha ao ler configuração {file_path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise ConfigError(f"Configuração {file_path} não é JSON válido: {exc}") from exc

    config = parse_config(data)
    logger.debug(f"Configuração carregada de {file_path}: ref={config.ref} patterns={len(config.patterns)}")
    return config
