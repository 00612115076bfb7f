"""Minimal physical/virtual address space backing the built-in commands."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .errors import AddressError

LOGGER = logging.getLogger("rair_shell.address_space")

U64_MAX = (1 << 64) - 1


class AddrMode(enum.Enum):
    PHY = "phy"
    VIR = "vir"

    @classmethod
    def parse(cls, text: str) -> "AddrMode":
        lowered = text.strip().lower()
        for mode in cls:
            if lowered in {mode.value, mode.name.lower(), mode.value[0]}:
                return mode
        raise ValueError(f"unknown addressing mode: {text}")


@dataclass(frozen=True)
class FileDesc:
    path: str
    paddr: int
    size: int
    data: bytes

    @property
    def end(self) -> int:
        return self.paddr + self.size


@dataclass(frozen=True)
class Mapping:
    vaddr: int
    paddr: int
    size: int

    @property
    def end(self) -> int:
        return self.vaddr + self.size


def _check_range(start: int, size: int) -> None:
    if start < 0 or size < 0 or start + size - 1 > U64_MAX:
        raise AddressError(f"range 0x{start:x}+0x{size:x} is outside the 64-bit address space")


class AddressSpace:
    """Files laid out in physical memory plus virtual-to-physical maps."""

    def __init__(self) -> None:
        self._files: List[FileDesc] = []
        self._maps: List[Mapping] = []

    def open(self, path: Union[str, Path], paddr: Optional[int] = None) -> FileDesc:
        source = Path(path).expanduser()
        data = source.read_bytes()
        if paddr is None:
            paddr = max((desc.end for desc in self._files), default=0)
        _check_range(paddr, len(data))
        for desc in self._files:
            if paddr < desc.end and desc.paddr < paddr + len(data):
                raise AddressError(f"0x{paddr:x} overlaps {desc.path} at 0x{desc.paddr:x}")
        desc = FileDesc(str(source), paddr, len(data), data)
        self._files.append(desc)
        self._files.sort(key=lambda entry: entry.paddr)
        LOGGER.debug("opened %s at 0x%x (%d bytes)", source, paddr, len(data))
        return desc

    def files(self) -> List[FileDesc]:
        return list(self._files)

    def map(self, paddr: int, vaddr: int, size: int) -> Mapping:
        if size <= 0:
            raise AddressError("map size must be positive")
        _check_range(paddr, size)
        _check_range(vaddr, size)
        for existing in self._maps:
            if vaddr < existing.end and existing.vaddr < vaddr + size:
                raise AddressError(f"virtual range 0x{vaddr:x}+0x{size:x} is already mapped")
        mapping = Mapping(vaddr, paddr, size)
        self._maps.append(mapping)
        self._maps.sort(key=lambda entry: entry.vaddr)
        return mapping

    def unmap(self, vaddr: int, size: int) -> None:
        """Remove ``[vaddr, vaddr + size)``, splitting maps at the edges."""
        if size <= 0:
            raise AddressError("unmap size must be positive")
        end = vaddr + size
        covered = sum(min(end, m.end) - max(vaddr, m.vaddr) for m in self._maps if m.vaddr < end and vaddr < m.end)
        if covered != size:
            raise AddressError(f"virtual range 0x{vaddr:x}+0x{size:x} is not fully mapped")
        remaining: List[Mapping] = []
        for mapping in self._maps:
            if mapping.end <= vaddr or end <= mapping.vaddr:
                remaining.append(mapping)
                continue
            if mapping.vaddr < vaddr:
                remaining.append(Mapping(mapping.vaddr, mapping.paddr, vaddr - mapping.vaddr))
            if end < mapping.end:
                delta = end - mapping.vaddr
                remaining.append(Mapping(end, mapping.paddr + delta, mapping.end - end))
        self._maps = sorted(remaining, key=lambda entry: entry.vaddr)

    def maps(self) -> List[Mapping]:
        return list(self._maps)

    def pread(self, paddr: int, size: int) -> List[Optional[int]]:
        out: List[Optional[int]] = []
        for addr in range(paddr, paddr + size):
            out.append(self._byte_at(addr))
        return out

    def vread(self, vaddr: int, size: int) -> List[Optional[int]]:
        out: List[Optional[int]] = []
        for addr in range(vaddr, vaddr + size):
            paddr = self.translate(addr)
            out.append(None if paddr is None else self._byte_at(paddr))
        return out

    def read(self, addr: int, size: int, mode: AddrMode) -> List[Optional[int]]:
        if mode is AddrMode.VIR:
            return self.vread(addr, size)
        return self.pread(addr, size)

    def translate(self, vaddr: int) -> Optional[int]:
        for mapping in self._maps:
            if mapping.vaddr <= vaddr < mapping.end:
                return mapping.paddr + (vaddr - mapping.vaddr)
        return None

    def _byte_at(self, paddr: int) -> Optional[int]:
        for desc in self._files:
            if desc.paddr <= paddr < desc.end:
                return desc.data[paddr - desc.paddr]
        return None


__all__ = ["AddrMode", "AddressSpace", "FileDesc", "Mapping", "U64_MAX"]
