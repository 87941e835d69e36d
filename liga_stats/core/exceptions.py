"""Exceções de domínio"""


class LigaStatsError(Exception):
    """Erro base da aplicação"""
    kind = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(LigaStatsError):
    """Time, jogador, partida, gol ou cartão inexistente"""
    kind = "not_found"
    status_code = 404

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} {entity_id} não encontrado")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(LigaStatsError):
    """Dados inválidos (número repetido, mandante igual a visitante, minuto fora do intervalo...)"""
    kind = "validation_error"
    status_code = 400


class ConsistencyError(LigaStatsError):
    """Atribuição de time que não corresponde a nenhum lado da partida"""
    kind = "consistency_error"
    status_code = 409
