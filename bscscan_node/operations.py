"""
작업 레지스트리 - 지원하는 BscScan 작업을 데이터 테이블로 관리
작업 추가는 코드 변경 없이 OPERATIONS 항목 추가로 끝난다
"""
import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .configuration import config
from .models import OperationDescriptor
from .utils import ConfigurationError

logger = logging.getLogger(__name__)


OPERATIONS: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        id="getBalanceSingle",
        upstream_module="account",
        upstream_action="balance",
        required_fields=frozenset({"address"}),
        field_mapping=(("address", "address"),),
        include_tag=True,
        label="Get BNB Balance for a Single Address",
        description="Returns the BNB balance of a given address.",
        aliases=("getBNBBalance",),
    ),
    OperationDescriptor(
        id="getBalanceMulti",
        upstream_module="account",
        upstream_action="balancemulti",
        required_fields=frozenset({"address"}),
        field_mapping=(("address", "address"),),
        include_tag=True,
        label="Get BNB Balance for Multiple Addresses in a Single Call(separated by a comma)",
        description="Returns the balance of the accounts from a list of addresses.",
        aliases=("getBNBBalanceMulti",),
    ),
    OperationDescriptor(
        id="getContractAbi",
        upstream_module="contract",
        upstream_action="getabi",
        required_fields=frozenset({"address"}),
        field_mapping=(("address", "address"),),
        label="Get Contract ABI for Verified Contract Source Codes",
        description="Returns the Contract Application Binary Interface ( ABI ) of a verified smart contract.",
        aliases=("getContractABI",),
    ),
    OperationDescriptor(
        id="getContractSource",
        upstream_module="contract",
        upstream_action="getsourcecode",
        required_fields=frozenset({"address"}),
        field_mapping=(("address", "address"),),
        label="Get Contract Source Code for Verified Contract Source Codes",
        description="Returns the Solidity source code of a verified smart contract",
        aliases=("getContractSourceCode",),
    ),
    OperationDescriptor(
        id="getContractCreator",
        upstream_module="contract",
        upstream_action="getcontractcreation",
        required_fields=frozenset({"address"}),
        field_mapping=(("address", "contractaddresses"),),
        label="Get Contract Creator and Creation Tx Hash",
        description=(
            "Returns a contract's deployer address and transaction hash it was created, "
            "up to 5 at a time(addresses entered in one line , each separated by a comma)."
        ),
        aliases=("getContractCreatorTxHash",),
    ),
    OperationDescriptor(
        id="getTxReceiptStatus",
        upstream_module="transaction",
        upstream_action="gettxreceiptstatus",
        required_fields=frozenset({"txhash"}),
        field_mapping=(("txhash", "txhash"),),
        label="Check Transaction Receipt Status",
        description="Returns the status code of a transaction execution.",
    ),
)


class OperationRegistry:
    """작업 레지스트리 - 초기화 후 변경되지 않음"""

    def __init__(self, operations=OPERATIONS):
        by_id: Dict[str, OperationDescriptor] = {}
        aliases: Dict[str, str] = {}
        for op in operations:
            if op.id in by_id:
                raise ValueError(f"중복된 작업 id: {op.id}")
            by_id[op.id] = op
            for alias in op.aliases:
                aliases[alias] = op.id

        self._operations: Mapping[str, OperationDescriptor] = MappingProxyType(by_id)
        self._aliases: Mapping[str, str] = MappingProxyType(aliases)

    def lookup(self, operation_id: str) -> OperationDescriptor:
        """작업 id(또는 이전 id)로 작업 정의 조회"""
        key = self._aliases.get(operation_id, operation_id)
        descriptor = self._operations.get(key)
        if descriptor is None:
            logger.warning(f"⚠️ 알 수 없는 작업: {operation_id!r}")
            raise ConfigurationError(f"Unsupported operation '{operation_id}'")
        return descriptor

    def list_operations(self) -> List[OperationDescriptor]:
        """등록된 작업 목록 (정의 순서)"""
        return list(self._operations.values())

    @property
    def default_operation(self) -> str:
        return config.DEFAULT_OPERATION


# 전역 레지스트리 인스턴스
_registry = None


def get_registry() -> OperationRegistry:
    """작업 레지스트리 인스턴스 가져오기"""
    global _registry
    if _registry is None:
        _registry = OperationRegistry()
    return _registry
