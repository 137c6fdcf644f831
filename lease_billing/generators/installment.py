"""Synthetic installment generator for lease contracts."""

import logging
from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from lease_billing.calculators import calculate_days_late, calculate_total_with_penalty_and_interest
from lease_billing.config import BillingConfig
from lease_billing.generators.base import BaseGenerator
from lease_billing.models import Installment, InstallmentStatus

logger = logging.getLogger(__name__)


class InstallmentGenerator(BaseGenerator):
    """Generate monthly rent installments with realistic charges.

    Rents are drawn from [1000.00, 6000.00). Installments due after the
    reference date are pending or issued; those already due are either paid
    on time or overdue, in which case penalty and interest are accrued up to
    the reference date.
    """

    MIN_RENT_CENTS = 100_000
    MAX_RENT_CENTS = 599_999
    PAID_PROBABILITY = 70  # percent of past installments that were paid

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        config: BillingConfig | None = None,
    ) -> None:
        super().__init__(seed, locale)
        self.config = config or BillingConfig()

    def _rent(self) -> Decimal:
        cents = self.fake.random_int(self.MIN_RENT_CENTS, self.MAX_RENT_CENTS)
        return Decimal(cents).scaleb(-2)

    def generate(
        self,
        contract_id: str,
        installment_number: int,
        due_date: date,
        reference_date: date | None = None,
        principal: Decimal | None = None,
    ) -> Installment:
        """Generate one installment.

        Parameters
        ----------
        contract_id : str
            Lease contract the installment belongs to.
        installment_number : int
            Position in the contract (1-based).
        due_date : date
            Due date (vencimento).
        reference_date : date | None
            Date the status and charges are computed for; defaults to today.
        principal : Decimal | None
            Rent amount; random when omitted.

        Returns
        -------
        Installment
            Generated installment.
        """
        reference_date = reference_date or date.today()
        principal = principal if principal is not None else self._rent()
        common = {
            "installment_id": self.fake.uuid4(),
            "contract_id": contract_id,
            "installment_number": installment_number,
            "competence": due_date.strftime("%Y-%m"),
            "due_date": due_date,
            "principal": principal,
        }

        if due_date >= reference_date:
            status = self.fake.random_element([InstallmentStatus.PENDENTE, InstallmentStatus.EMITIDO])
            return Installment(**common, status=status)

        if self.fake.random_int(1, 100) <= self.PAID_PROBABILITY:
            return Installment(
                **common,
                status=InstallmentStatus.PAGO,
                paid_amount=principal,
                paid_date=due_date,
            )

        charges = calculate_total_with_penalty_and_interest(
            principal,
            calculate_days_late(due_date, reference_date),
            penalty_percent=self.config.penalty_percent,
            daily_interest_percent=self.config.daily_interest_percent,
        )
        return Installment(
            **common,
            penalty=charges.penalty,
            interest=charges.interest,
            status=InstallmentStatus.VENCIDO,
        )

    def generate_schedule(
        self,
        contract_id: str,
        first_due_date: date,
        count: int,
        reference_date: date | None = None,
    ) -> list[Installment]:
        """Generate ``count`` monthly installments with the same rent."""
        rent = self._rent()
        installments = [
            self.generate(
                contract_id,
                number,
                first_due_date + relativedelta(months=number - 1),
                reference_date=reference_date,
                principal=rent,
            )
            for number in range(1, count + 1)
        ]
        logger.info("Generated %d installments for contract %s", len(installments), contract_id)
        return installments
