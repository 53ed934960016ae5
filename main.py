import argparse
import logging
import sys

from update_monitor.config import load_config
from update_monitor.constants import DEBUG_MODE, LOG_FORMAT, MONITOR_CONFIG, SERVICE_NAME
from update_monitor.controller import create_app
from update_monitor.exceptions import ConfigError, PatternCompileError
from update_monitor.matcher import compile_patterns

logger = logging.getLogger(SERVICE_NAME)


def parse_arguments(args=None):
    parser = argparse.ArgumentParser(
        prog=SERVICE_NAME,
        description="Alerta no Slack quando um push altera arquivos sensíveis",
    )
    parser.add_argument(
        'config',
        nargs='?',
        default=MONITOR_CONFIG,
        help="arquivo JSON de configuração (padrão: $MONITOR_CONFIG)",
    )
    parsed = parser.parse_args(args)
    if not parsed.config:
        parser.error("informe o arquivo de configuração")
    return parsed


def main(args=None):
    parsed = parse_arguments(args)
    logging.basicConfig(level=logging.DEBUG if DEBUG_MODE else logging.INFO, format=LOG_FORMAT)

    # Configuração e padrões inválidos na partida derrubam o processo
    try:
        config = load_config(parsed.config)
        compile_patterns(config.patterns)
    except (ConfigError, PatternCompileError) as exc:
        logger.critical(exc.message)
        return 1

    app = create_app(parsed.config)
    try:
        # use_reloader=False evita o processo duplicado do reloader quando DEBUG_MODE está ativo
        app.run(host='0.0.0.0', port=config.port, debug=DEBUG_MODE, use_reloader=False)
    except SystemExit:
        # O werkzeug trata a falha de bind (OSError) e encerra com sys.exit(1)
        logger.error(f"Error starting server on port {config.port}")
        return 1
    except OSError as exc:
        logger.error(f"Error starting server: {exc}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
