#!/usr/bin/env python3
"""
Seed database with test data for development.

Creates the three roles, one company with an owner, a dispatcher and two
technicians, a client and a few job types, then prints a bearer token for
each user.
"""

import asyncio
import logging
import os

from sqlalchemy import func, select

from fieldops.api.security import create_access_token
from fieldops.application.services.authorization_gate import (
    BUSINESS_OWNER,
    DISPATCHER,
    TECHNICIAN,
)
from fieldops.config.database import (
    close_database_connections,
    create_engine,
    get_async_session_factory,
)
from fieldops.infrastructure.database.models import (
    Base,
    ClientModel,
    CompanyModel,
    JobTypeModel,
    RoleModel,
    UserModel,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def create_tables() -> None:
    """Create tables directly when migrations have not been run (sqlite dev)."""
    engine = create_engine()
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()


async def seed_database() -> None:
    """Seed database with test data."""
    if os.getenv("SEED_CREATE_TABLES"):
        await create_tables()

    async with get_async_session_factory()() as session:
        existing = await session.execute(select(func.count(CompanyModel.id)))
        if existing.scalar() > 0:
            logger.info("Database already has data, skipping seed.")
            return

        logger.info("Creating roles...")
        roles = {
            name: RoleModel(name=name, description=f"{name.title()} role")
            for name in (BUSINESS_OWNER, DISPATCHER, TECHNICIAN)
        }
        session.add_all(roles.values())

        logger.info("Creating company...")
        company = CompanyModel(name="Northside Plumbing & Heating")
        session.add(company)
        await session.flush()

        logger.info("Creating users...")
        users = [
            UserModel(
                first_name="Olivia",
                last_name="Owner",
                email="owner@northside.example",
                company_id=company.id,
                role_id=roles[BUSINESS_OWNER].id,
            ),
            UserModel(
                first_name="Dan",
                last_name="Dispatch",
                email="dispatch@northside.example",
                company_id=company.id,
                role_id=roles[DISPATCHER].id,
            ),
            UserModel(
                first_name="Tara",
                last_name="Pipes",
                email="tara@northside.example",
                company_id=company.id,
                role_id=roles[TECHNICIAN].id,
            ),
            UserModel(
                first_name="Theo",
                last_name="Valves",
                email="theo@northside.example",
                company_id=company.id,
                role_id=roles[TECHNICIAN].id,
            ),
        ]
        session.add_all(users)

        logger.info("Creating client and job types...")
        client = ClientModel(
            first_name="Carla",
            last_name="Customer",
            email="carla@example.com",
            company_id=company.id,
        )
        session.add(client)
        session.add_all(
            JobTypeModel(name=name)
            for name in ("Installation", "Maintenance", "Repair", "Inspection")
        )

        await session.commit()

        logger.info("Seed complete: company_id=%s client_id=%s", company.id, client.id)
        for user in users:
            logger.info(
                "%s <%s> id=%s token=%s",
                user.first_name,
                user.email,
                user.id,
                create_access_token(user.id),
            )

    await close_database_connections()


if __name__ == "__main__":
    asyncio.run(seed_database())
