"""Rate limiter compartilhado entre a aplicação e os endpoints

Só as rotas decoradas com ``@limiter.limit`` são limitadas.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)
