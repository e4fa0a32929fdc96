"""Lookup Result Value Object"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CompletionStatus(str, Enum):
    """CloudFormation に返す完了ステータス"""

    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


@dataclass(frozen=True)
class LookupResult:
    """
    ルックアップ結果（値オブジェクト）

    1 回の呼び出しにつき 1 つだけ生成され、完了シグナルとして送信される。
    失敗時の data は常に空。
    """

    status: CompletionStatus
    data: dict[str, str] = field(default_factory=dict)
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.status == CompletionStatus.FAILED and self.data:
            raise ValueError("Failed lookup result must not carry response data")

    @classmethod
    def success(cls, data: dict[str, str] | None = None) -> LookupResult:
        return cls(status=CompletionStatus.SUCCESS, data=dict(data or {}))

    @classmethod
    def failed(cls, reason: str) -> LookupResult:
        return cls(status=CompletionStatus.FAILED, reason=reason)

    @property
    def is_success(self) -> bool:
        return self.status == CompletionStatus.SUCCESS
