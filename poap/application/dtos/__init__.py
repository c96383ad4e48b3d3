from poap.application.dtos.contract_dtos import ContractResponse, GetCountResponse

__all__ = ["ContractResponse", "GetCountResponse"]
