"""検証結果のデータモデル。"""

from typing import Self

from pydantic import BaseModel, Field


class VerificationReport(BaseModel):
    """検証で検出されたエラーと警告の集計。"""

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def failure(cls, message: str) -> Self:
        """エラーを1件だけ含むレポートを作成する。"""
        return cls(errors=[message])

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def extend(self, other: "VerificationReport") -> None:
        """別のレポートのエラーと警告を順序を保って末尾に追加する。"""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
