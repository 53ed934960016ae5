import os

# Configurações globais de ambiente
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Caminho do arquivo de configuração quando não informado na linha de comando
MONITOR_CONFIG = os.getenv("MONITOR_CONFIG")

# Timeout do envio ao Slack; vazio = sem timeout (comportamento original)
_notify_timeout_env = os.getenv("NOTIFY_TIMEOUT_SECONDS", "").strip()
NOTIFY_TIMEOUT_SECONDS = float(_notify_timeout_env) if _notify_timeout_env else None

SERVICE_NAME = "vendor-update-monitor"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Webhook do GitHub
EVENT_HEADER = "X-GitHub-Event"
PUSH_EVENT = "push"

# Mensagem do Slack
ALERT_HEADER_TEXT = "Someone is changing flagged files"
COMPARE_LINK_TEXT = "Link to github"
