"""マニフェスト関連のデータモデル。"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

EntityName = Annotated[str, StringConstraints(min_length=1)]


class DirectoryRule(BaseModel):
    """ベースディレクトリ配下の1つの検証対象ディレクトリ。"""

    model_config = ConfigDict(strict=True, frozen=True)

    extension: str
    required: bool
    path: str
    ignored_entities: list[str] = Field(alias="ignoredEntities")


class EntityGroup(BaseModel):
    """同じディレクトリルールを共有するエンティティ群。"""

    model_config = ConfigDict(strict=True, frozen=True)

    entities: list[EntityName]
    directories: list[DirectoryRule]


class Manifest(BaseModel):
    """1つのベースディレクトリに対するマニフェスト定義。"""

    model_config = ConfigDict(strict=True, frozen=True)

    entity_groups: list[EntityGroup] = Field(alias="entityDirectories")
