"""
Data models for the EthQR SDK.

One pydantic model per payment request mode. Every model forbids keys outside
its allow-list and accepts only wire names (``from``, ``chainId``,
``functionSignature``, ``argsDefaults``) as input.
"""
from abc import abstractmethod
from enum import Enum
from typing import Any, ClassVar, List, Literal, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator, model_validator

from .exceptions import PaymentRequestValidationError
from .validators import (
    is_valid_address,
    is_valid_amount,
    is_valid_argument_name,
    is_valid_chain_id,
    is_valid_function_name,
    is_valid_gas,
    is_valid_solidity_type,
)


class PaymentMode(str, Enum):
    """Explicit payment request modes. A payload without a mode is a basic transfer."""
    CONTRACT_FUNCTION = "contract_function"
    ERC20_TRANSFER = "erc20__transfer"
    ERC20_APPROVE = "erc20__approve"
    ERC20_TRANSFER_FROM = "erc20__transferFrom"


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def allowed_fields(cls) -> Tuple[str, ...]:
        """Field names accepted on the wire, in declaration order"""
        return tuple(info.alias or name for name, info in cls.model_fields.items())


class FunctionArgument(_WireModel):
    """A single ``{name, type}`` entry of a function signature"""
    name: StrictStr
    type: StrictStr

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not is_valid_argument_name(v):
            raise ValueError("is not a valid function argument name")
        return v

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        if not is_valid_solidity_type(v):
            raise ValueError("is not a valid Solidity type name")
        return v


class FunctionSignature(_WireModel):
    """Contract function called by a ``contract_function`` request"""
    name: StrictStr
    payable: StrictBool
    args: Optional[List[FunctionArgument]] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not is_valid_function_name(v):
            raise ValueError("is not a valid function name")
        return v

    @field_validator("args")
    @classmethod
    def validate_args(cls, v: Optional[List[FunctionArgument]]) -> Optional[List[FunctionArgument]]:
        if v is not None and len(v) == 0:
            raise ValueError("is an empty list, omit it if the function does not have arguments")
        return v


class ArgumentDefault(_WireModel):
    """Default value attached to a named function argument"""
    name: StrictStr
    amount: Any

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not is_valid_argument_name(v):
            raise ValueError("is not a valid function argument name")
        return v

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Any) -> Any:
        # only presence is checked, the value itself is caller-defined
        if v is None:
            raise ValueError("of the function argument is not provided")
        return v


class _PaymentRequestBase(_WireModel):
    """Fields shared by every mode"""
    to: StrictStr
    from_address: Optional[StrictStr] = Field(None, alias="from")
    amount: Optional[Any] = None
    gas: Optional[StrictInt] = None
    chain_id: Optional[StrictInt] = Field(None, alias="chainId")

    @field_validator("to", "from_address")
    @classmethod
    def validate_address(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not is_valid_address(v):
            raise ValueError("is not a valid Ethereum address")
        return v

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Any) -> Any:
        if v is not None and not is_valid_amount(v):
            raise ValueError("is not a valid Ethereum amount")
        return v

    @field_validator("gas")
    @classmethod
    def validate_gas(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not is_valid_gas(v):
            raise ValueError("is not a valid gas amount")
        return v

    @field_validator("chain_id")
    @classmethod
    def validate_chain_id(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not is_valid_chain_id(v):
            raise ValueError("is not a valid Ethereum chainId")
        return v

    @property
    def mode(self) -> Optional[PaymentMode]:
        return None


class BasicTransfer(_PaymentRequestBase):
    """Plain value transfer, encoded as an ``ethereum:`` URI"""
    pass


class _FunctionCallRequest(_PaymentRequestBase):
    """Base for modes that call a function and may carry argument defaults"""
    args_defaults: Optional[List[ArgumentDefault]] = Field(None, alias="argsDefaults")

    @field_validator("args_defaults")
    @classmethod
    def validate_args_defaults(cls, v: Optional[List[ArgumentDefault]]) -> Optional[List[ArgumentDefault]]:
        if v is not None and len(v) == 0:
            raise ValueError("is an empty list, omit it if there are no default amounts")
        return v

    @abstractmethod
    def function_arguments(self) -> Optional[Sequence[FunctionArgument]]:
        """Arguments that ``argsDefaults`` entries may name, None when the function takes none"""

    @model_validator(mode="after")
    def check_defaults_match_arguments(self):
        # not a ValueError, so pydantic lets it propagate with its own field path
        if self.args_defaults is None:
            return self
        arguments = self.function_arguments()
        if arguments is None:
            raise PaymentRequestValidationError(
                "argsDefaults",
                [{"name": d.name, "amount": d.amount} for d in self.args_defaults],
                "provided while the function does not have arguments",
            )
        names = {arg.name for arg in arguments}
        for index, default in enumerate(self.args_defaults):
            if default.name not in names:
                raise PaymentRequestValidationError(
                    f"argsDefaults.{index}.name",
                    default.name,
                    "does not match any argument of the function signature",
                )
        return self


class ContractFunctionRequest(_FunctionCallRequest):
    """Arbitrary contract call described by an explicit function signature"""
    mode_name: Literal["contract_function"] = Field(alias="mode")
    function_signature: FunctionSignature = Field(alias="functionSignature")

    @property
    def mode(self) -> PaymentMode:
        return PaymentMode.CONTRACT_FUNCTION

    def function_arguments(self) -> Optional[Sequence[FunctionArgument]]:
        return self.function_signature.args


class _Erc20Request(_FunctionCallRequest):
    """ERC-20 call with a fixed, built-in argument set"""
    BUILTIN_ARGUMENTS: ClassVar[Tuple[FunctionArgument, ...]] = ()

    def function_arguments(self) -> Optional[Sequence[FunctionArgument]]:
        return self.BUILTIN_ARGUMENTS


class Erc20TransferRequest(_Erc20Request):
    BUILTIN_ARGUMENTS: ClassVar[Tuple[FunctionArgument, ...]] = (
        FunctionArgument(name="to", type="address"),
        FunctionArgument(name="amount", type="uint"),
    )
    mode_name: Literal["erc20__transfer"] = Field(alias="mode")

    @property
    def mode(self) -> PaymentMode:
        return PaymentMode.ERC20_TRANSFER


class Erc20ApproveRequest(_Erc20Request):
    BUILTIN_ARGUMENTS: ClassVar[Tuple[FunctionArgument, ...]] = (
        FunctionArgument(name="spender", type="address"),
        FunctionArgument(name="amount", type="uint"),
    )
    mode_name: Literal["erc20__approve"] = Field(alias="mode")

    @property
    def mode(self) -> PaymentMode:
        return PaymentMode.ERC20_APPROVE


class Erc20TransferFromRequest(_Erc20Request):
    BUILTIN_ARGUMENTS: ClassVar[Tuple[FunctionArgument, ...]] = (
        FunctionArgument(name="from", type="address"),
        FunctionArgument(name="to", type="address"),
        FunctionArgument(name="amount", type="uint"),
    )
    mode_name: Literal["erc20__transferFrom"] = Field(alias="mode")

    @property
    def mode(self) -> PaymentMode:
        return PaymentMode.ERC20_TRANSFER_FROM


PaymentRequest = Union[
    BasicTransfer,
    ContractFunctionRequest,
    Erc20TransferRequest,
    Erc20ApproveRequest,
    Erc20TransferFromRequest,
]
