"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest
from faker import Faker

from lease_billing.models import Debt, Installment, InstallmentStatus


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fake(seed: int) -> Faker:
    """Seeded Faker instance."""
    faker = Faker("pt_BR")
    faker.seed_instance(seed)
    return faker


@pytest.fixture
def sample_contract_id() -> str:
    """Sample contract ID."""
    return "contrato-test-001"


@pytest.fixture
def sample_debt() -> Debt:
    """Rent of 1000 with 2% penalty and 5.00 of interest."""
    return Debt(principal=Decimal("1000"), penalty=Decimal("20"), interest=Decimal("5"))


@pytest.fixture
def random_debts(fake: Faker) -> list[Debt]:
    """Fifty debts with cent-precision amounts."""
    return [
        Debt(
            principal=Decimal(fake.random_int(0, 800_000)).scaleb(-2),
            penalty=Decimal(fake.random_int(0, 16_000)).scaleb(-2),
            interest=Decimal(fake.random_int(0, 30_000)).scaleb(-2),
        )
        for _ in range(50)
    ]


@pytest.fixture
def overdue_installment(sample_contract_id: str) -> Installment:
    """Installment of 1000 due on 2025-01-01, not yet paid."""
    return Installment(
        installment_id="parcela-test-001",
        contract_id=sample_contract_id,
        installment_number=1,
        competence="2025-01",
        due_date=date(2025, 1, 1),
        principal=Decimal("1000.00"),
        status=InstallmentStatus.VENCIDO,
    )
