"""Pacote do monitor de alterações sensíveis (GitHub push -> Slack).

Este pacote contém:
- constants: variáveis de ambiente e valores padrão
- exceptions: hierarquia de erros do monitor
- config: leitura do arquivo de configuração (recarregado a cada request)
- events: parsing do payload de push em ChangeEvent/ChangeRecord
- matcher: compilação de padrões e detecção de arquivos violados
- formatters: montagem da mensagem do Slack (Block Kit)
- services: envio para o webhook do Slack
- controller: criação do Flask app e endpoints
"""
