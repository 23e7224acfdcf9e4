"""Company, client, project and product CRUD with fit scoring on import."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from leadintel.models import Client, Company, Product, Project
from leadintel.schemas.catalog import ClientCreate, ProductCreate, ProjectCreate
from leadintel.schemas.company import CompanyCreate
from leadintel.services.fit.fit_writer import apply_fit_score

logger = logging.getLogger(__name__)


class ReferenceNotFoundError(ValueError):
    """Raised when a create request points at a client/project/product that does not exist."""

    pass


def _require(db: Session, model, record_id: int | None, label: str) -> None:
    if record_id is None:
        return
    if db.query(model.id).filter(model.id == record_id).first() is None:
        raise ReferenceNotFoundError(f"{label} {record_id} not found")


def create_client(db: Session, data: ClientCreate) -> Client:
    client = Client(name=data.name)
    db.add(client)
    db.commit()
    db.refresh(client)
    return client


def create_product(db: Session, data: ProductCreate) -> Product:
    """Create a product target profile for a client."""
    _require(db, Client, data.client_id, "Client")
    product = Product(**data.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


def create_project(db: Session, data: ProjectCreate) -> Project:
    """Create a campaign for a client, optionally tied to a product."""
    _require(db, Client, data.client_id, "Client")
    _require(db, Product, data.product_id, "Product")
    project = Project(**data.model_dump())
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


def get_project(db: Session, project_id: int) -> Project | None:
    return db.query(Project).filter(Project.id == project_id).first()


def create_company(db: Session, data: CompanyCreate) -> Company:
    """Import a company and fit-score it immediately.

    Raises:
        ReferenceNotFoundError: Unknown client or project.
    """
    _require(db, Client, data.client_id, "Client")
    _require(db, Project, data.project_id, "Project")

    values = data.model_dump(exclude={"enrichment"})
    enrichment = data.enrichment.model_dump(exclude_none=True) if data.enrichment else None
    company = Company(**values, enrichment=enrichment or None)
    result = apply_fit_score(company)
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info(
        "Company imported: id=%s rank=%s score=%d", company.id, result.rank, result.score
    )
    return company


def get_company(db: Session, company_id: int) -> Company | None:
    """Return company by id or None."""
    return db.query(Company).filter(Company.id == company_id).first()
