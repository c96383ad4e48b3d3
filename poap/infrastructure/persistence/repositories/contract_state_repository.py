"""Store-backed ContractStateRepository (state and contract_info singletons)."""

from poap.core.enums import ErrorCode
from poap.core.errors import NotFoundError
from poap.core.result import Failure, Result, Success
from poap.domain.entities import ContractInfo, ContractState
from poap.domain.errors import ContractError
from poap.domain.protocols import KeyValueStoreProtocol
from poap.infrastructure.persistence.codec import decode_record, encode_record
from poap.infrastructure.storage.keys import StorageKeys


class StoreContractStateRepository:
    """ContractStateRepository over a KeyValueStoreProtocol."""

    def __init__(
        self, store: KeyValueStoreProtocol, keys: StorageKeys | None = None
    ) -> None:
        self._store = store
        self._keys = keys or StorageKeys()

    def load_state(self) -> Result[ContractState, NotFoundError]:
        raw = self._store.get(self._keys.state())
        if raw is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.STATE_NOT_FOUND,
                    message=ContractError.STATE_NOT_FOUND,
                    resource_type="ContractState",
                    resource_id=self._keys.state().decode("utf-8"),
                )
            )
        return Success(value=decode_record(ContractState, raw))

    def find_info(self) -> ContractInfo | None:
        raw = self._store.get(self._keys.contract_info())
        if raw is None:
            return None
        return decode_record(ContractInfo, raw)

    def initialize(self, state: ContractState, info: ContractInfo) -> None:
        self._store.put_many(
            {
                self._keys.state(): encode_record(state),
                self._keys.contract_info(): encode_record(info),
            }
        )
