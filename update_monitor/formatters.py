from typing import Dict, List, Sequence

from .constants import ALERT_HEADER_TEXT, COMPARE_LINK_TEXT


def _text_block(block_type: str, text_type: str, text: str) -> Dict:
    return {
        'type': block_type,
        'text': {'type': text_type, 'text': text},
    }


def format_file_list(files: Sequence[str]) -> str:
    return "```" + "\n".join(files) + "```"


def format_compare_link(compare: str) -> str:
    return f"<{compare}|{COMPARE_LINK_TEXT}>"


def build_alert_blocks(files: Sequence[str], compare: str) -> List[Dict]:
    if not files:
        raise ValueError("Lista de arquivos violados vazia: nada a alertar")
    return [
        _text_block('header', 'plain_text', ALERT_HEADER_TEXT),
        _text_block('section', 'mrkdwn', format_file_list(files)),
        _text_block('section', 'mrkdwn', format_compare_link(compare)),
    ]


def build_alert_payload(files: Sequence[str], compare: str) -> Dict:
    """
    Monta o corpo Block Kit do Slack: cabeçalho, lista de arquivos em bloco de código
    e link para a comparação no GitHub. Função pura, sem I/O.
    """
    return {'blocks': build_alert_blocks(files, compare)}
