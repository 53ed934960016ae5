import logging
import re
from typing import Iterable, List, Pattern, Sequence

from .events import ChangeEvent
from .exceptions import PatternCompileError

logger = logging.getLogger(__name__)


def compile_patterns(patterns: Iterable[str]) -> List[Pattern]:
    """
    Compila os padrões configurados. Um padrão inválido é erro de configuração:
    nunca é ignorado, sempre gera PatternCompileError.
    """
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise PatternCompileError(pattern, str(exc)) from exc
    return compiled


def match_paths(compiled: Sequence[Pattern], paths: Iterable[str]) -> List[str]:
    # Busca em qualquer posição do caminho (search, não fullmatch); mantém a ordem de entrada
    return [path for path in paths if any(p.search(path) for p in compiled)]


def remove_duplicates(paths: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            result.append(path)
    return result


class PatternMatcher:
    """Conjunto de padrões compilado para um único request."""

    def __init__(self, patterns: Iterable[str]):
        self.patterns = tuple(patterns)
        self._compiled = compile_patterns(self.patterns)

    def filter(self, paths: Iterable[str]) -> List[str]:
        return match_paths(self._compiled, paths)

    def violations(self, event: ChangeEvent) -> List[str]:
        files = []
        for record in event.records:
            hits = self.filter(record.added) + self.filter(record.modified) + self.filter(record.removed)
            if hits:
                logger.info(f"Commit {record.revision} altera arquivo(s) sinalizado(s): {', '.join(hits)}")
            files.extend(hits)
        result = remove_duplicates(files)
        if result:
            logger.debug(f"{len(result)} arquivo(s) violado(s) em {len(event.records)} commit(s)")
        return result


def find_violating_files(patterns: Iterable[str], event: ChangeEvent) -> List[str]:
    return PatternMatcher(patterns).violations(event)
