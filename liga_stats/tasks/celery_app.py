"""Configuração do Celery"""
from celery import Celery
from celery.schedules import crontab
from liga_stats.core.config import settings

celery_app = Celery(
    'liga_stats',
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend
)

celery_app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone='UTC',
    enable_utc=True,
    task_track_started=True,
    task_time_limit=600,
    worker_max_tasks_per_child=50,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
)

# Reconciliação periódica dos placares com os gols registrados
celery_app.conf.beat_schedule = {
    'repair-match-scores': {
        'task': 'liga_stats.tasks.maintenance.repair_match_scores',
        'schedule': crontab(minute=f'*/{settings.SCORE_REPAIR_MINUTES}'),
    },
    'check-data-integrity': {
        'task': 'liga_stats.tasks.maintenance.check_data_integrity',
        'schedule': crontab(minute=0, hour=4),
    },
}

# Importa as tasks para registro no worker
from liga_stats.tasks import maintenance  # noqa: E402,F401
