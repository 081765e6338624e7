from .count_notifier import CountNotifier
from .stamp_placement_service import StampPlacementService
from .history_service import HistoryService, HistoryStream

__all__ = ["CountNotifier", "StampPlacementService", "HistoryService", "HistoryStream"]
