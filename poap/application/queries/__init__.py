from poap.application.queries.contract_queries import GetCount

__all__ = ["GetCount"]
