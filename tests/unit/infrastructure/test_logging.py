"""Unit tests for execution-scoped logging."""
import logging

from core.domain.value_objects import ExecutionID
from core.infrastructure.logging import bind_execution


def test_messages_carry_execution_id(caplog):
    execution_id = ExecutionID.generate()
    log = bind_execution(logging.getLogger("tests.logging"), execution_id)

    with caplog.at_level(logging.INFO, logger="tests.logging"):
        log.info("reconciled")

    assert caplog.records[-1].getMessage() == f"[{execution_id}] reconciled"


def test_adapter_loggers_propagate_to_root():
    import core.infrastructure.adapters.notifications.resend_order_mailer as resend_order_mailer
    import core.infrastructure.marketplace.shopify.client as shopify_client
    import core.infrastructure.storage.supabase_storage as supabase_storage

    for module in (shopify_client, supabase_storage, resend_order_mailer):
        assert module.logger.name == module.__name__
        assert module.logger.handlers == []
        assert module.logger.propagate is True
