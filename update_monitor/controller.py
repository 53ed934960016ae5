import logging

from flask import Flask, request
from werkzeug.exceptions import ClientDisconnected

from .config import load_config
from .constants import EVENT_HEADER, PUSH_EVENT, SERVICE_NAME
from .events import parse_push_event
from .exceptions import BodyReadError, ConfigError, ParseError, PatternCompileError, SendError
from .formatters import build_alert_payload
from .matcher import find_violating_files
from .services import send_slack_payload

logger = logging.getLogger(__name__)


def read_body():
    try:
        return request.get_data(cache=False)
    except (ClientDisconnected, OSError, ValueError) as exc:
        raise BodyReadError(f"Error reading request body: {exc}") from exc


def notify_violations(config, files, compare):
    """Envio fire-and-forget: falhas são logadas e nunca chegam ao chamador do webhook."""
    payload = build_alert_payload(files, compare)
    try:
        send_slack_payload(config.slack, payload)
    except SendError as exc:
        logger.error(f"Falha ao enviar alerta ao Slack: {exc.message}")
        return False
    logger.info(f"Alerta enviado ao Slack ({len(files)} arquivo(s))")
    return True


def create_app(config_path):
    app = Flask(__name__)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': SERVICE_NAME}, 200

    @app.route('/webhook', methods=['POST'])
    def webhook():
        # Relê a configuração a cada request: mudanças valem sem reiniciar o serviço
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            logger.error(f"Could not parse config: {exc.message}")
            return {}

        try:
            body = read_body()
        except BodyReadError as exc:
            logger.error(exc.message)
            return {}

        event_type = request.headers.get(EVENT_HEADER)
        if event_type != PUSH_EVENT:
            logger.debug(f"Evento ignorado: {event_type!r}")
            return {}

        try:
            event = parse_push_event(body)
        except ParseError as exc:
            logger.warning(f"Error parsing push event: {exc.message}")
            return {}

        if event.ref != config.ref:
            logger.debug(f"Push em {event.ref} ignorado (monitorando {config.ref})")
            return {}

        logger.info(f"New commit on branch {event.ref} ({event.repository or 'repositório desconhecido'} @ {event.revision})")
        files = find_violating_files(config.patterns, event)
        should_alert = len(files) > 0
        if should_alert:
            notify_violations(config, files, event.compare)

        return {'files': files, 'shouldAlert': should_alert}

    @app.errorhandler(PatternCompileError)
    def pattern_compile_error(exc):
        logger.critical(f"Padrão inválido na configuração: {exc.message}")
        return {}, 500

    return app
