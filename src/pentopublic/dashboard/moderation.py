"""Approve/reject actions for pending submissions.

The remote call goes first; the local transition (``apply_decision``) runs only
once it has succeeded, so a failed call leaves the dashboard untouched.
"""
from __future__ import annotations

import logging

from pentopublic.api.schemas.admin import EntityId
from pentopublic.dashboard.aggregator import AdminAPI
from pentopublic.dashboard.notifications import NotificationKind, Notifier
from pentopublic.dashboard.store import DashboardStore, Decision
from pentopublic.ui.api_client import APIError

logger = logging.getLogger(__name__)

_PAST_TENSE = {Decision.APPROVE: "approved", Decision.REJECT: "rejected"}


async def moderate(
    client: AdminAPI,
    store: DashboardStore,
    notifier: Notifier,
    submission_id: EntityId,
    decision: Decision,
) -> bool:
    verb = decision.value
    call = client.approve_submission if decision is Decision.APPROVE else client.reject_submission
    try:
        await call(submission_id)
    except APIError as exc:
        logger.warning("Failed to %s book %s: %s", verb, submission_id, exc)
        notifier.show(f"Failed to {verb} book: {exc.detail}", NotificationKind.ERROR)
        return False

    store.apply_decision(submission_id, decision)
    logger.info("Book %s %s", submission_id, _PAST_TENSE[decision])
    notifier.show(f"Book {_PAST_TENSE[decision]} successfully", NotificationKind.SUCCESS)
    return True


async def approve(
    client: AdminAPI, store: DashboardStore, notifier: Notifier, submission_id: EntityId,
) -> bool:
    return await moderate(client, store, notifier, submission_id, Decision.APPROVE)


async def reject(
    client: AdminAPI, store: DashboardStore, notifier: Notifier, submission_id: EntityId,
) -> bool:
    return await moderate(client, store, notifier, submission_id, Decision.REJECT)
