# abi_fetcher/models/abi.py
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from ..utils.abi_utils import (
    canonical_type,
    event_topic0,
    function_selector,
    signature_of,
)


class AbiFormatError(ValueError):
    """ABI не является списком записей нужной структуры."""
    pass


@dataclass(frozen=True, slots=True)
class AbiParam:
    name: str
    type: str
    internal_type: Optional[str] = None
    indexed: Optional[bool] = None
    components: Tuple["AbiParam", ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AbiParam":
        if not isinstance(data, dict) or not isinstance(data.get("type"), str):
            raise AbiFormatError(f"Invalid ABI parameter: {data}")
        components = tuple(cls.from_dict(c) for c in data.get("components") or [])
        return cls(
            name=data.get("name") or "",
            type=data["type"],
            internal_type=data.get("internalType"),
            indexed=data.get("indexed"),
            components=components,
        )

    @property
    def canonical_type(self) -> str:
        return canonical_type(self.type, [c.canonical_type for c in self.components])

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "type": self.type}
        if self.internal_type is not None:
            out["internalType"] = self.internal_type
        if self.indexed is not None:
            out["indexed"] = self.indexed
        if self.components:
            out["components"] = [c.to_dict() for c in self.components]
        return out


@dataclass(frozen=True, slots=True)
class AbiEntry:
    """
    Одна запись ABI: функция, событие, конструктор, ошибка, fallback или receive.
    """
    type: str
    name: Optional[str] = None
    inputs: Tuple[AbiParam, ...] = ()
    outputs: Tuple[AbiParam, ...] = ()
    state_mutability: Optional[str] = None
    anonymous: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AbiEntry":
        if not isinstance(data, dict):
            raise AbiFormatError(f"ABI entry is not an object: {data}")
        # Старые компиляторы опускают "type" у функций
        entry_type = data.get("type", "function")
        inputs = data.get("inputs") or []
        outputs = data.get("outputs") or []
        if not isinstance(inputs, list) or not isinstance(outputs, list):
            raise AbiFormatError(f"ABI entry has invalid inputs/outputs: {data}")
        return cls(
            type=entry_type,
            name=data.get("name"),
            inputs=tuple(AbiParam.from_dict(p) for p in inputs),
            outputs=tuple(AbiParam.from_dict(p) for p in outputs),
            state_mutability=data.get("stateMutability"),
            anonymous=bool(data.get("anonymous", False)),
        )

    @property
    def signature(self) -> Optional[str]:
        """Каноническая сигнатура, например `Transfer(address,address,uint256)`."""
        if not self.name:
            return None
        return signature_of(self.name, [p.canonical_type for p in self.inputs])

    @property
    def selector(self) -> Optional[str]:
        """4-байтовый селектор (только для function и error)."""
        if self.type not in ("function", "error") or not self.signature:
            return None
        return function_selector(self.signature)

    @property
    def topic0(self) -> Optional[str]:
        """keccak256 сигнатуры события. У анонимных событий topic0 отсутствует."""
        if self.type != "event" or self.anonymous or not self.signature:
            return None
        return event_topic0(self.signature)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.name is not None:
            out["name"] = self.name
        if self.type not in ("fallback", "receive"):
            out["inputs"] = [p.to_dict() for p in self.inputs]
        if self.type == "function":
            out["outputs"] = [p.to_dict() for p in self.outputs]
        if self.state_mutability is not None:
            out["stateMutability"] = self.state_mutability
        if self.type == "event":
            out["anonymous"] = self.anonymous
        return out


@dataclass(frozen=True, slots=True)
class AbiDocument:
    entries: Tuple[AbiEntry, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: Union[str, List[Dict[str, Any]]]) -> "AbiDocument":
        """
        Строит документ из JSON-строки или уже разобранного списка.

        :raises AbiFormatError: если это не список записей ABI.
        """
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except json.JSONDecodeError as e:
                raise AbiFormatError(f"ABI is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise AbiFormatError(f"ABI must be a JSON array, got {type(data).__name__}")
        return cls(entries=tuple(AbiEntry.from_dict(item) for item in data))

    def __iter__(self) -> Iterator[AbiEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def functions(self) -> List[AbiEntry]:
        return [e for e in self.entries if e.type == "function"]

    @property
    def events(self) -> List[AbiEntry]:
        return [e for e in self.entries if e.type == "event"]

    def get(self, name: str) -> Optional[AbiEntry]:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.entries]
