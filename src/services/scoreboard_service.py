"""Orchestration between the game loop and the persistence layer: keeps score over the rounds of one session."""

import logging
from uuid import UUID

from src.api.models import ScoreboardResponse
from src.core.exceptions import GameStateError
from src.core.models import RoundModel
from src.core.shared_types import Mark, Status
from src.db.repository import RoundRepository

logger = logging.getLogger(__name__)


class ScoreboardService:
    """Records finished rounds and tallies the results."""

    def __init__(self, repository: RoundRepository) -> None:
        self.repo = repository

    def record_round(self, round_model: RoundModel) -> UUID:
        """Only decided rounds make it onto the scoreboard."""
        if round_model.status == Status.IN_PROGRESS:
            raise GameStateError(
                f"Cannot record a round that is still in progress. moves: {round_model.moves}"
            )
        round_id = self.repo.add_round(round_model)
        logger.info(
            "Recorded round %s: status=%s winner=%s",
            round_id,
            round_model.status,
            round_model.winner,
        )
        return round_id

    def scoreboard(self) -> ScoreboardResponse:
        rounds = self.repo.list_rounds()
        wins = {mark: 0 for mark in Mark}
        draws = 0
        for round_model in rounds:
            if round_model.status == Status.DRAW:
                draws += 1
            elif round_model.winner is not None:
                wins[Mark(round_model.winner)] += 1
        return ScoreboardResponse(rounds_played=len(rounds), wins=wins, draws=draws)
