"""Read-only instance routes."""

from fastapi import APIRouter, Depends, Request

from .instance_schemas import ConfigResponse, ContractInfoResponse
from .instance_service import InstanceService

router = APIRouter(prefix="/api", tags=["instance"])


def get_instance_service(request: Request) -> InstanceService:
    try:
        return request.app.state.instance_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("InstanceService is not configured") from exc


@router.get("/config", response_model=ConfigResponse)
def read_config(service: InstanceService = Depends(get_instance_service)) -> ConfigResponse:
    config = service.get_config()
    return ConfigResponse(admin_address=config.admin_address)


@router.get("/version", response_model=ContractInfoResponse)
def read_version(
    service: InstanceService = Depends(get_instance_service),
) -> ContractInfoResponse:
    info = service.get_contract_info()
    return ContractInfoResponse(contract=info.contract, version=info.version)
