"""Unit tests for MintBadgeHandler.

Tests cover:
- Successful mint (both indexes, notification, logging)
- Check order: existence, owner, not started, already over, address, duplicate
- Closed window bounds
- Idempotence (first was_late kept)
- No write on failure
"""

from unittest.mock import Mock

import pytest

from poap.application.commands import MintBadge
from poap.application.commands.handlers import MintBadgeHandler
from poap.core.enums import ErrorCode
from poap.core.errors import ValidationError
from poap.core.result import Failure, Success
from poap.domain.entities import BadgeRecord, EventRecord
from poap.domain.events import BadgeMinted
from poap.infrastructure.addresses import BasicAddressValidator
from poap.infrastructure.persistence.repositories import (
    StoreBadgeRepository,
    StoreEventRepository,
)
from poap.infrastructure.storage import InMemoryStore
from tests.conftest import ATTENDEE_A, ATTENDEE_B, OWNER, STRANGER, ctx


def mint(attendee: str = ATTENDEE_A, was_late: bool = False, event: str = "DevCon"):
    return MintBadge(event=event, attendee=attendee, was_late=was_late)


@pytest.fixture
def event_repo(store: InMemoryStore) -> StoreEventRepository:
    repo = StoreEventRepository(store)
    repo.save(
        EventRecord(
            owner=OWNER,
            name="DevCon",
            image="https://x/img.png",
            description="",
            start_time=100,
            end_time=200,
        )
    )
    return repo


@pytest.fixture
def badge_repo(store: InMemoryStore) -> StoreBadgeRepository:
    return StoreBadgeRepository(store)


@pytest.fixture
def address_validator() -> Mock:
    validator = Mock(wraps=BasicAddressValidator())
    return validator


@pytest.fixture
def handler(event_repo, badge_repo, address_validator, logger) -> MintBadgeHandler:
    return MintBadgeHandler(
        event_repo=event_repo,
        badge_repo=badge_repo,
        address_validator=address_validator,
        logger=logger,
    )


@pytest.mark.unit
class TestMintBadgeSuccess:
    """Test successful minting."""

    def test_writes_both_indexes(self, handler, badge_repo):
        result = handler.handle(ctx(OWNER, 150), mint(was_late=True))

        assert isinstance(result, Success)
        assert result.value.data == BadgeRecord(was_late=True)
        assert badge_repo.find_by_event("DevCon", ATTENDEE_A) == BadgeRecord(
            was_late=True
        )
        assert badge_repo.find_by_attendee(ATTENDEE_A, "DevCon") == BadgeRecord(
            was_late=True
        )

    def test_emits_badge_minted_notification(self, handler):
        result = handler.handle(ctx(OWNER, 150), mint())

        assert isinstance(result, Success)
        (event,) = result.value.events
        assert isinstance(event, BadgeMinted)
        assert event.attributes() == (("event", "DevCon"), ("attendee", ATTENDEE_A))
        assert result.value.attributes == ()

    def test_logs_mint(self, handler, logger):
        handler.handle(ctx(OWNER, 150), mint())

        logger.info.assert_called_once_with(
            "badge_minted", event="DevCon", attendee=ATTENDEE_A, was_late=False
        )

    @pytest.mark.parametrize("now", [100, 200])
    def test_window_bounds_are_inclusive(self, handler, now):
        assert isinstance(handler.handle(ctx(OWNER, now), mint()), Success)

    def test_stores_validated_address(self, event_repo, badge_repo, logger):
        validator = Mock()
        validator.validate.return_value = Success(value="canonical_a")
        handler = MintBadgeHandler(event_repo, badge_repo, validator, logger)

        handler.handle(ctx(OWNER, 150), mint(attendee="raw_a"))

        assert badge_repo.has_badge("DevCon", "canonical_a")
        assert not badge_repo.has_badge("DevCon", "raw_a")


@pytest.mark.unit
class TestMintBadgeChecks:
    """Test each rejection and the order in which checks run."""

    def test_unknown_event(self, handler):
        result = handler.handle(ctx(OWNER, 150), mint(event="NoSuchCon"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EVENT_NOT_FOUND
        assert result.error.resource_id == "NoSuchCon"

    def test_unknown_event_reported_before_authorization(self, handler):
        result = handler.handle(ctx(STRANGER, 0), mint(event="NoSuchCon"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EVENT_NOT_FOUND

    def test_non_owner_rejected_inside_window(self, handler):
        result = handler.handle(ctx(STRANGER, 150), mint())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHORIZED

    def test_authorization_reported_before_window(self, handler):
        result = handler.handle(ctx(STRANGER, 50), mint(attendee="X"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHORIZED

    def test_not_started(self, handler):
        result = handler.handle(ctx(OWNER, 99), mint())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EVENT_NOT_STARTED

    def test_already_over(self, handler):
        result = handler.handle(ctx(OWNER, 201), mint())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EVENT_ALREADY_OVER
        assert result.error.message == "Event is already over"

    def test_window_reported_before_address(self, handler, address_validator):
        result = handler.handle(ctx(OWNER, 201), mint(attendee="X"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EVENT_ALREADY_OVER
        address_validator.validate.assert_not_called()

    def test_invalid_address_propagated_unchanged(self, event_repo, badge_repo, logger):
        error = ValidationError(
            code=ErrorCode.INVALID_ADDRESS, message="Invalid input: bad", field="attendee"
        )
        validator = Mock()
        validator.validate.return_value = Failure(error=error)
        handler = MintBadgeHandler(event_repo, badge_repo, validator, logger)

        result = handler.handle(ctx(OWNER, 150), mint(attendee="Bad Address"))

        assert result == Failure(error=error)
        validator.validate.assert_called_once_with("Bad Address")

    def test_address_reported_before_duplicate(self, handler, badge_repo):
        badge_repo.issue("DevCon", "X", BadgeRecord(was_late=False))

        result = handler.handle(ctx(OWNER, 150), mint(attendee="X"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ADDRESS

    def test_unencodable_address_is_a_format_error(self, handler, store):
        before = store.snapshot()

        result = handler.handle(ctx(OWNER, 150), mint(attendee="ab\ud800c"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ADDRESS
        assert result.error.message == "Invalid input: address is not valid UTF-8"
        assert store.snapshot() == before

    def test_unencodable_event_name_is_not_found(self, handler):
        result = handler.handle(ctx(OWNER, 150), mint(event="Dev\ud800Con"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EVENT_NOT_FOUND


@pytest.mark.unit
class TestMintBadgeIdempotence:
    """Test duplicate mints."""

    def test_second_mint_rejected_and_first_badge_kept(self, handler, badge_repo):
        assert isinstance(handler.handle(ctx(OWNER, 150), mint(was_late=False)), Success)

        result = handler.handle(ctx(OWNER, 160), mint(was_late=True))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.BADGE_ALREADY_ISSUED
        assert badge_repo.find_by_event("DevCon", ATTENDEE_A) == BadgeRecord(
            was_late=False
        )
        assert badge_repo.find_by_attendee(ATTENDEE_A, "DevCon") == BadgeRecord(
            was_late=False
        )

    def test_other_attendee_still_mintable(self, handler):
        handler.handle(ctx(OWNER, 150), mint(ATTENDEE_A))

        assert isinstance(handler.handle(ctx(OWNER, 150), mint(ATTENDEE_B)), Success)


@pytest.mark.unit
class TestMintBadgeNoPartialWrites:
    """Failed mints leave the store untouched."""

    @pytest.mark.parametrize(
        "sender,now,attendee",
        [
            (STRANGER, 150, ATTENDEE_A),
            (OWNER, 99, ATTENDEE_A),
            (OWNER, 201, ATTENDEE_A),
            (OWNER, 150, "A"),
        ],
    )
    def test_failure_writes_nothing(self, handler, store, sender, now, attendee):
        before = store.snapshot()

        result = handler.handle(ctx(sender, now), mint(attendee=attendee))

        assert isinstance(result, Failure)
        assert store.snapshot() == before

    def test_rejection_is_logged(self, handler, logger):
        handler.handle(ctx(STRANGER, 150), mint())

        logger.info.assert_called_once_with(
            "badge_mint_rejected",
            event="DevCon",
            attendee=ATTENDEE_A,
            error_code="unauthorized",
        )
