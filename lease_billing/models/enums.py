"""Enumeration types for lease billing entities."""

from enum import Enum


class InstallmentStatus(str, Enum):
    PENDENTE = "pendente"  # awaiting issue
    EMITIDO = "emitido"  # boleto/PIX issued
    PAGO = "pago"
    VENCIDO = "vencido"
    CANCELADO = "cancelado"
    ESTORNADO = "estornado"  # payment reversed

    @property
    def is_open(self) -> bool:
        """Whether the installment can still accrue charges."""
        return self in (InstallmentStatus.PENDENTE, InstallmentStatus.EMITIDO, InstallmentStatus.VENCIDO)


class AdjustmentIndex(str, Enum):
    IGPM = "IGPM"
    IPCA = "IPCA"
    INPC = "INPC"
    NENHUM = "Nenhum"

    @property
    def label(self) -> str:
        return {
            "IGPM": "IGP-M",
            "IPCA": "IPCA",
            "INPC": "INPC",
            "Nenhum": "Nenhum",
        }[self.value]


class CollectionEventType(str, Enum):
    """Steps of the collection schedule (régua de cobrança)."""

    LEMBRETE = "lembrete"
    AVISO = "aviso"
    REAVISO_1 = "reaviso_1"
    REAVISO_2 = "reaviso_2"
    JURIDICO = "juridico"

    @property
    def offset_days(self) -> int:
        """Days relative to the due date."""
        return {
            "lembrete": -3,
            "aviso": 1,
            "reaviso_1": 7,
            "reaviso_2": 15,
            "juridico": 30,
        }[self.value]

    @property
    def description(self) -> str:
        return {
            "lembrete": "Lembrete enviado 3 dias antes do vencimento",
            "aviso": "Aviso de atraso enviado 1 dia após vencimento",
            "reaviso_1": "Primeiro reaviso enviado 7 dias após vencimento",
            "reaviso_2": "Negociação iniciada 15 dias após vencimento",
            "juridico": "Encaminhado para jurídico 30 dias após vencimento",
        }[self.value]
