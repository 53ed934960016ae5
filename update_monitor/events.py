import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .exceptions import ParseError


@dataclass(frozen=True)
class ChangeRecord:
    """Arquivos adicionados/removidos/modificados por um único commit."""

    revision: str
    added: Tuple[str, ...] = ()
    removed: Tuple[str, ...] = ()
    modified: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ChangeEvent:
    ref: str
    revision: str
    compare: str
    records: Tuple[ChangeRecord, ...] = ()
    repository: Optional[str] = None


def _require_str(data: Dict[str, Any], key: str, where: str) -> str:
    if key not in data:
        raise ParseError(f"Campo obrigatório ausente em {where}: '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise ParseError(f"Campo '{key}' em {where} deve ser string, recebido {type(value).__name__}")
    return value


def _path_list(data: Dict[str, Any], key: str, where: str) -> Tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(p, str) for p in value):
        raise ParseError(f"Campo '{key}' em {where} deve ser uma lista de strings")
    return tuple(value)


def _parse_commit(raw: Any, index: int) -> ChangeRecord:
    where = f"commits[{index}]"
    if not isinstance(raw, dict):
        raise ParseError(f"{where} deve ser um objeto")
    return ChangeRecord(
        revision=_require_str(raw, 'id', where),
        added=_path_list(raw, 'added', where),
        removed=_path_list(raw, 'removed', where),
        modified=_path_list(raw, 'modified', where),
    )


def _repository_name(data: Dict[str, Any]) -> Optional[str]:
    repository = data.get('repository')
    if not isinstance(repository, dict):
        return None
    name = repository.get('name')
    return name if isinstance(name, str) else None


def parse_push_event(body: Union[bytes, str]) -> ChangeEvent:
    """
    Converte o corpo de um webhook de push do GitHub em ChangeEvent.
    Campos obrigatórios: ref, compare, commits (null = lista vazia) e o id de cada commit.
    Qualquer payload mal formado gera ParseError.
    """
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise ParseError(f"Payload não é JSON válido: {exc}") from exc

    if not isinstance(data, dict):
        raise ParseError("Payload de push deve ser um objeto JSON")

    if 'commits' not in data:
        raise ParseError("Campo obrigatório ausente em payload: 'commits'")
    commits = data['commits']
    if commits is None:
        commits = []
    if not isinstance(commits, list):
        raise ParseError("Campo 'commits' deve ser uma lista")

    after = data.get('after')
    return ChangeEvent(
        ref=_require_str(data, 'ref', 'payload'),
        revision=after if isinstance(after, str) else '',
        compare=_require_str(data, 'compare', 'payload'),
        records=tuple(_parse_commit(c, i) for i, c in enumerate(commits)),
        repository=_repository_name(data),
    )
