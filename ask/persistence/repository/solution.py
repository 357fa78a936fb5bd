"""PostgreSQL implementation of Solution repository."""

from collections import defaultdict
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import delete, select

from ask.domain.model import Solution, SolutionStep
from ask.domain.repository import SolutionRepository
from ask.persistence.mappers import (
    row_to_solution,
    row_to_solution_step,
    solution_step_to_dict,
    solution_to_dict,
)
from ask.persistence.tables import solution_steps_table, solutions_table

from .content import PostgresContentRepository


class PostgresSolutionRepository(
    PostgresContentRepository[Solution], SolutionRepository
):
    """PostgreSQL implementation of SolutionRepository.

    Steps live in their own table and are loaded with the solution. Purging
    a solution removes its steps through the foreign key cascade.
    """

    table = solutions_table
    row_to_model = staticmethod(row_to_solution)
    model_to_dict = staticmethod(solution_to_dict)

    async def _hydrate(self, rows: Sequence[Any]) -> list[Solution]:
        if not rows:
            return []

        stmt = (
            select(solution_steps_table)
            .where(solution_steps_table.c.solution_id.in_([row["id"] for row in rows]))
            .order_by(solution_steps_table.c.solution_id, solution_steps_table.c.position)
        )
        result = await self.session.execute(stmt)

        steps: dict[UUID, list[SolutionStep]] = defaultdict(list)
        for step_row in result.mappings().all():
            steps[step_row["solution_id"]].append(row_to_solution_step(dict(step_row)))

        return [row_to_solution(dict(row), steps.get(row["id"], [])) for row in rows]

    async def save(self, item: Solution) -> Solution:
        """Save a solution and replace its steps."""
        await super().save(item)

        await self.session.execute(
            delete(solution_steps_table).where(
                solution_steps_table.c.solution_id == item.id
            )
        )
        if item.steps:
            await self.session.execute(
                solution_steps_table.insert(),
                [solution_step_to_dict(item.id, step) for step in item.steps],
            )

        await self.session.flush()
        return item
