"""Database connection and storage utilities."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from fastapi import Request
from pydantic.alias_generators import to_camel, to_snake
from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from intake.core.exceptions import NotFoundError, StorageError, ValidationError
from intake.schemas.application import (
    REQUIRED_FIELDS,
    ApplicationCreate,
    ApplicationRead,
    ApplicationStatus,
)

if TYPE_CHECKING:
    from intake.core.config import Settings
    from intake.models.application import Application

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def normalize_skills(value: Any) -> list[str]:
    """Coerce a submitted skills value into a list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        try:
            decoded = json.loads(text)
        except ValueError:
            decoded = None
        if isinstance(decoded, list):
            value = decoded
        else:
            value = text.split(",")
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


def _missing_fields(data: Mapping[str, Any]) -> list[str]:
    missing = []
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if value is None or not str(value).strip():
            missing.append(to_camel(field))
    return missing


class ApplicationStorage:
    """Persistence for membership applications.

    One instance owns an engine and its session factory; it is created by
    the app factory and handed to route handlers as a dependency.
    """

    def __init__(
        self,
        database_url: str,
        *,
        echo: bool = False,
        submitted_at_format: str = "%d/%m/%Y %H:%M:%S",
        submitted_at_timezone: str = "Europe/Paris",
    ):
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            expire_on_commit=False,
        )
        self.submitted_at_format = submitted_at_format
        self.timezone = ZoneInfo(submitted_at_timezone)

    @classmethod
    def from_settings(cls, settings: Settings) -> ApplicationStorage:
        """Build storage from application settings."""
        return cls(
            settings.database_url,
            echo=settings.sql_echo,
            submitted_at_format=settings.submitted_at_format,
            submitted_at_timezone=settings.submitted_at_timezone,
        )

    async def init_models(self) -> None:
        """Create tables that do not exist yet."""
        import intake.models  # noqa: F401  registers mappers on Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Release pooled connections."""
        await self.engine.dispose()

    def _submitted_at(self) -> str:
        return datetime.now(self.timezone).strftime(self.submitted_at_format)

    async def create_application(
        self, fields: ApplicationCreate | Mapping[str, Any]
    ) -> int:
        """Validate and insert a new application, returning its id."""
        from intake.models.application import Application

        if isinstance(fields, ApplicationCreate):
            data = fields.model_dump()
        else:
            data = {to_snake(key): value for key, value in fields.items()}

        missing = _missing_fields(data)
        if missing:
            raise ValidationError(missing)

        application = Application(
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            city=data["city"],
            motivation=data["motivation"],
            contribution=data["contribution"],
            availability=data["availability"],
            skills=normalize_skills(data.get("skills")),
            other_details=data.get("other_details"),
            membership_type=data["membership_type"],
            newsletter_opt_in=bool(data.get("newsletter_opt_in")),
            status=ApplicationStatus.PENDING.value,
            submitted_at=self._submitted_at(),
        )

        try:
            async with self.session_factory() as session:
                session.add(application)
                await session.commit()
                await session.refresh(application)
        except SQLAlchemyError as e:
            logger.error(f"Error inserting application: {e}")
            raise StorageError("create application", str(e)) from e

        logger.info(f"Created application {application.id}")
        return application.id

    async def list_applications(self) -> list[ApplicationRead]:
        """Return every application, newest first."""
        from intake.models.application import Application

        query = select(Application).order_by(
            Application.created_at.desc(), Application.id.desc()
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching applications: {e}")
            raise StorageError("fetch applications", str(e)) from e

        return [self._to_read(row) for row in rows]

    async def get_application(self, application_id: int) -> ApplicationRead:
        """Return one application or raise NotFoundError."""
        from intake.models.application import Application

        try:
            async with self.session_factory() as session:
                row = await session.get(Application, application_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching application {application_id}: {e}")
            raise StorageError("fetch application", str(e)) from e

        if row is None:
            raise NotFoundError(application_id)
        return self._to_read(row)

    async def set_status(
        self, application_id: int, new_status: ApplicationStatus | str
    ) -> None:
        """Move an application to approved or rejected."""
        from intake.models.application import Application

        new_status = ApplicationStatus(new_status)
        if new_status is ApplicationStatus.PENDING:
            raise ValueError("Applications can only be approved or rejected")

        verb = "approve" if new_status is ApplicationStatus.APPROVED else "reject"
        query = (
            update(Application)
            .where(Application.id == application_id)
            .values(status=new_status.value)
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error trying to {verb} application {application_id}: {e}")
            raise StorageError(f"{verb} application", str(e)) from e

        if result.rowcount == 0:
            raise NotFoundError(application_id)
        logger.info(f"Application {application_id} set to {new_status.value}")

    async def count_by_status(self) -> dict[str, int]:
        """Count applications in total and per status.

        Each count is read separately; one that fails is logged and left
        out of the result instead of failing the whole report.
        """
        from intake.models.application import Application

        queries = {"total": select(func.count()).select_from(Application)}
        for status in ApplicationStatus:
            queries[status.value] = (
                select(func.count())
                .select_from(Application)
                .where(Application.status == status.value)
            )

        stats: dict[str, int] = {}
        async with self.session_factory() as session:
            for key, query in queries.items():
                try:
                    stats[key] = (await session.execute(query)).scalar_one()
                except SQLAlchemyError as e:
                    logger.warning(f"Failed to count {key} applications: {e}")
                    await session.rollback()
        return stats

    @staticmethod
    def _to_read(row: Application) -> ApplicationRead:
        data = {column.key: getattr(row, column.key) for column in row.__table__.columns}
        data["skills"] = normalize_skills(row.skills)
        data["newsletter_opt_in"] = bool(row.newsletter_opt_in)
        return ApplicationRead.model_validate(data)


def get_storage(request: Request) -> ApplicationStorage:
    """FastAPI dependency returning the app's storage handle."""
    return request.app.state.storage
