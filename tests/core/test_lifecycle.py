"""End-to-end lifecycle of a tenant-scoped aggregate."""

import pytest
from dataclasses import dataclass

from neo_domain.core.entities import AggregateRoot, TenantScopedEntity
from neo_domain.core.events import DomainEvent
from neo_domain.core.exceptions import DomainRuleViolation, InvalidBindingState


@dataclass(frozen=True)
class InvoiceIssued(DomainEvent):
    invoice_external_id: str
    amount_cents: int


class Invoice(TenantScopedEntity, AggregateRoot):
    """Sample aggregate built on the kernel."""

    def __init__(self, amount_cents: int, **kwargs):
        super().__init__(**kwargs)
        self.amount_cents = amount_cents
        self.issued = False

    def issue(self) -> None:
        if self.issued:
            raise DomainRuleViolation("Invoice already issued")
        if self.amount_cents <= 0:
            raise DomainRuleViolation(
                "Invoice amount must be positive",
                ValueError(self.amount_cents),
            )
        self.issued = True
        self.register_domain_event(
            InvoiceIssued(self.external_id, self.amount_cents, occurred_at=self._now())
        )
        self.touch()


class FailingPublisher:
    def publish(self, event):
        raise ConnectionError("broker unavailable")


class TestInvoiceLifecycle:
    """Construct, bind, mutate, dispatch, drain."""

    def test_full_scenario(self, clock, tenant_id, other_tenant_id, user_id):
        invoice = Invoice(1500, clock=clock)

        invoice.set_tenant(tenant_id)
        invoice.set_tenant(tenant_id)
        with pytest.raises(InvalidBindingState):
            invoice.set_tenant(other_tenant_id)
        assert invoice.tenant_id == tenant_id

        invoice.set_user(user_id)

        clock.advance(seconds=30)
        event = InvoiceIssued(invoice.external_id, 1500, occurred_at=clock.now())
        invoice.register_domain_event(event)
        invoice.touch()

        assert invoice.domain_events == (event,)
        assert invoice.updated_at > invoice.created_at

        dispatched = list(invoice.domain_events)
        invoice.clear_domain_events()

        assert dispatched == [event]
        assert invoice.domain_events == ()

    def test_business_operation_registers_event(self, clock, tenant_id):
        invoice = Invoice(990, clock=clock)
        invoice.set_tenant(tenant_id)

        clock.advance(minutes=1)
        invoice.issue()

        (event,) = invoice.domain_events
        assert isinstance(event, InvoiceIssued)
        assert event.invoice_external_id == invoice.external_id
        assert event.occurred_at == clock.now()
        assert invoice.updated_at == clock.now()

    def test_rule_violations_propagate(self):
        invoice = Invoice(100)
        invoice.issue()

        with pytest.raises(DomainRuleViolation, match="already issued"):
            invoice.issue()

        assert len(invoice.domain_events) == 1

    def test_rule_violation_with_cause(self):
        invoice = Invoice(0)

        with pytest.raises(DomainRuleViolation) as exc_info:
            invoice.issue()

        assert isinstance(exc_info.value.cause, ValueError)
        assert invoice.domain_events == ()

    def test_failed_dispatch_keeps_events_for_retry(self):
        invoice = Invoice(100)
        invoice.issue()
        publisher = FailingPublisher()

        with pytest.raises(ConnectionError):
            for event in invoice.domain_events:
                publisher.publish(event)
            invoice.clear_domain_events()

        assert len(invoice.domain_events) == 1

    def test_persistence_assigns_key_after_binding(self, tenant_id, user_id):
        invoice = Invoice(100)
        invoice.set_tenant(tenant_id)
        invoice.set_user(user_id)
        assert not invoice.is_persisted

        invoice.touch()
        invoice.id = 1

        assert invoice.is_persisted
        assert invoice.tenant_id == tenant_id
        assert invoice.owner_id == user_id
