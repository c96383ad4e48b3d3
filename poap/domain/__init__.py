"""Domain layer - Pure business logic.

Entities, value objects, protocols (ports) and domain events of the
attendance registry. NO dependencies on any framework or infrastructure.

Structure:
- entities/: EventRecord, BadgeRecord, ContractState, ContractInfo
- value_objects/: ExecutionContext (caller identity and block time)
- protocols/: store, repository, address validation and logging ports
- events/: notifications attached to successful responses
- validators/: ordered event field rules
"""
