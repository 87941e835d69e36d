"""Tasks de manutenção"""
from liga_stats.tasks.celery_app import celery_app
from liga_stats.core.database import SessionLocal
from liga_stats.core.data_integrity import DataIntegrityChecker
from liga_stats.services.match_result_service import MatchResultService
import logging

logger = logging.getLogger(__name__)


@celery_app.task
def repair_match_scores():
    """Recalcula placares que divergiram da contagem de gols"""
    db = SessionLocal()
    try:
        repaired = MatchResultService(db).repair_all_scores()
        if repaired:
            logger.warning(f"🔧 {len(repaired)} placares corrigidos: {repaired}")
        else:
            logger.debug("Placares consistentes, nada a corrigir")
        return {"status": "success", "repaired": len(repaired), "matches": repaired}
    except Exception as e:
        logger.error(f"❌ Erro ao reparar placares: {e}", exc_info=True)
        raise
    finally:
        db.close()


@celery_app.task
def check_data_integrity():
    """Executa a verificação de integridade e registra o resultado"""
    db = SessionLocal()
    try:
        result = DataIntegrityChecker(db).check_data_consistency()
        if result["issues_found"]:
            logger.warning(f"⚠️ Integridade: {result['issues_found']} problemas encontrados")
        return result
    finally:
        db.close()
