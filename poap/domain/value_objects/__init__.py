from poap.domain.value_objects.execution_context import ExecutionContext

__all__ = ["ExecutionContext"]
