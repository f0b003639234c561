"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devproof.domain.error import NotFoundError
from devproof.domain.model import Skill, User
from devproof.domain.repository import UserRepository
from devproof.domain.value import UserId
from devproof.persistence.mappers import (
    row_to_skill,
    row_to_user,
    skill_to_dict,
    user_to_dict,
)
from devproof.persistence.tables import skills_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, including its skills.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        skills = await self._find_skills(user_id)
        return row_to_user(dict(row), skills)

    async def _find_skills(self, user_id: UserId) -> list[Skill]:
        stmt = (
            select(skills_table)
            .where(skills_table.c.user_id == user_id)
            .order_by(skills_table.c.skill_name)
        )
        result = await self.session.execute(stmt)
        return [row_to_skill(dict(row)) for row in result.mappings().all()]

    async def create(self, user: User) -> User:
        """Insert a new user and its skills.

        The insert runs in a SAVEPOINT so that a duplicate ID only undoes
        this insert and leaves the request transaction usable.

        Args:
            user: User to insert

        Returns:
            The inserted user

        Raises:
            IntegrityError: If a user with this ID already exists
        """
        async with self.session.begin_nested():
            await self.session.execute(users_table.insert().values(**user_to_dict(user)))
            if user.skills:
                await self.session.execute(
                    skills_table.insert(),
                    [skill_to_dict(skill) for skill in user.skills],
                )

        return user

    async def save(self, user: User) -> User:
        """Update a user's profile fields.

        Args:
            user: User to update

        Returns:
            Updated user with its stored skills

        Raises:
            NotFoundError: If the user does not exist
        """
        user_dict = user_to_dict(user)
        user_dict.pop("id")
        user_dict.pop("created_at")

        stmt = (
            users_table.update()
            .where(users_table.c.id == user.id)
            .values(**user_dict)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            raise NotFoundError("User", user.id)

        await self.session.flush()

        return user.model_copy(update={"skills": await self._find_skills(user.id)})
