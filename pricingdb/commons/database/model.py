from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, TypeVar, Union, cast

import sqlalchemy
from pydantic import BaseModel, ConfigDict
from sqlalchemy import (
    Column,
    ForeignKeyConstraint,
    Index,
    PrimaryKeyConstraint,
    Table,
    UniqueConstraint,
    and_,
)
from sqlalchemy.exc import ArgumentError
from sqlalchemy.sql.expression import ColumnElement, FromClause, Join
from sqlalchemy.sql.schema import SchemaItem

from pricingdb.commons.utils.dataclass_extensions import no_init_field

TableDefinitionT = TypeVar("TableDefinitionT", bound="TableDefinition")


@dataclass(frozen=True, eq=False)
class TableDefinition:
    """
    Customized wrapper around SqlAlchemy Table object so that we can statically refer to column names and add more
    extensions around table schema

    An instance is either bound to a real table (the canonical definition of the table, or a renamed copy of it)
    or is an aliased view of another definition, used when the same table appears several times in one query.
    Aliased instances expose the alias columns under the same attribute names and read keys and indexes
    from the real table they derive from.

    Subclasses must be declared with @dataclass(frozen=True, eq=False): sqlalchemy Column overloads ==,
    so instances compare and hash by identity.
    """

    db_metadata: sqlalchemy.MetaData

    # Name presented to the query builder, defaults to the real table name
    table_name: Optional[str] = None

    # Definition this instance is an alias of, None for a real table
    aliased: Optional["TableDefinition"] = None

    # Set by rename() only, binds a real table under table_name
    _renamed: bool = field(default=False, repr=False)

    table: FromClause = no_init_field()
    name: str = no_init_field()

    # Only set on join path aliases, see join_path()
    path_child: Optional["TableDefinition"] = no_init_field()
    path_key: Optional[ForeignKeyConstraint] = no_init_field()

    # Additional kwargs passed to creating a Sqlalchemy table
    # See https://docs.sqlalchemy.org/en/20/core/metadata.html#sqlalchemy.schema.Table
    additional_schema_kwargs: Dict[str, Any] = no_init_field({})

    def additional_schema_args(self) -> List[SchemaItem]:
        """
        Additional positional SchemaItem args (constraints, indexes) passed to creating a Sqlalchemy table.
        Called once per bound table, since a SchemaItem can only be attached to a single table.
        """
        return []

    def _validate_column(self, column: Column):
        if column.default is not None:
            raise ArgumentError(
                f"Application-level defaults are not supported; they must be manually specified in INSERT statements.\n"
                f"Column '{column.name}' in table '{self.name}' has "
                f"application-level default specified: {repr(column.default)}"
            )

    def _column_attribute_names(self) -> List[str]:
        # declaration order, which is the column order of the table
        return [
            f.name
            for f in fields(self)
            if isinstance(getattr(self, f.name, None), Column)
        ]

    def __post_init__(self):
        """
        Utilize dataclass post init hook to load any instance attribute
        with sqlalchemy.Column type as a column of delegate Table
        """
        object.__setattr__(self, "path_child", None)
        object.__setattr__(self, "path_key", None)
        if self.table_name is not None:
            if self.aliased is None and not self._renamed:
                raise ArgumentError(
                    f"'{type(self).__name__}' named '{self.table_name}' needs the definition it aliases, "
                    f"use as_() or rename()"
                )
            object.__setattr__(self, "name", self.table_name)

        if self.aliased is None:
            self._bind_table()
        else:
            self._bind_alias(self.aliased)

    def _bind_table(self):
        sa_schema_positional_args: List[SchemaItem] = []
        # Append Column instances first
        for attribute_name in self._column_attribute_names():
            column = getattr(self, attribute_name)
            self._validate_column(column)
            sa_schema_positional_args.append(column)
        # Then append other schema items
        sa_schema_positional_args.extend(self.additional_schema_args())

        object.__setattr__(
            self,
            "table",
            Table(
                self.name,
                self.db_metadata,
                *sa_schema_positional_args,
                **self.additional_schema_kwargs,
            ),
        )

    def _bind_alias(self, aliased: "TableDefinition"):
        if not isinstance(aliased, type(self)):
            raise ArgumentError(
                f"'{type(self).__name__}' cannot alias a different table definition "
                f"'{type(aliased).__name__}'"
            )
        # an alias of an alias still renders the real table under the new name
        root = aliased.root
        alias = root.table.alias(self.name)
        object.__setattr__(self, "table", alias)
        for attribute_name in self._column_attribute_names():
            root_column: Column = getattr(root, attribute_name)
            object.__setattr__(self, attribute_name, alias.c[root_column.name])

    @property
    def root(self) -> "TableDefinition":
        """
        The real (unaliased) table definition this instance derives from
        """
        definition = self
        while definition.aliased is not None:
            definition = definition.aliased
        return definition

    @property
    def is_aliased(self) -> bool:
        return self.aliased is not None

    @property
    def columns(self) -> List[Column]:
        return [getattr(self, name) for name in self._column_attribute_names()]

    @property
    def schema(self) -> Optional[str]:
        return self.root.table.schema

    @property
    def indexes(self) -> List[Index]:
        return sorted(self.root.table.indexes, key=lambda index: str(index.name))

    @property
    def identity(self) -> Optional[Column]:
        """
        The column whose values are generated by the database on insert
        """
        for column in self.root.table.columns:
            if column.identity is not None:
                return column
        return None

    @property
    def primary_key(self) -> PrimaryKeyConstraint:
        return self.root.table.primary_key

    @property
    def keys(self) -> List[Union[PrimaryKeyConstraint, UniqueConstraint]]:
        """
        All unique keys of the table, primary key first
        """
        table = self.root.table
        unique_keys: List[Union[PrimaryKeyConstraint, UniqueConstraint]] = sorted(
            (c for c in table.constraints if isinstance(c, UniqueConstraint)),
            key=lambda constraint: str(constraint.name),
        )
        if table.primary_key.columns:
            return [table.primary_key] + unique_keys
        return unique_keys

    def as_(self: TableDefinitionT, alias: str) -> TableDefinitionT:
        """
        Create an aliased reference of this table, whose alias reference is this instance
        """
        return type(self)(db_metadata=self.db_metadata, table_name=alias, aliased=self)

    def rename(self: TableDefinitionT, name: str) -> TableDefinitionT:
        """
        Create an independent, unaliased table definition under a new name.

        The renamed table is registered in its own MetaData (same schema and naming convention)
        so it never clashes with tables already defined in this definition's metadata.
        """
        db_metadata = sqlalchemy.MetaData(
            schema=self.root.db_metadata.schema,
            naming_convention=self.root.db_metadata.naming_convention,
        )
        return type(self)(db_metadata=db_metadata, table_name=name, _renamed=True)

    def join_path(
        self: TableDefinitionT, child: "TableDefinition", key: ForeignKeyConstraint
    ) -> TableDefinitionT:
        """
        Create an aliased reference of this table reached from child through the foreign key.

        :param child: table definition holding the foreign key
        :param key: foreign key constraint of child referencing this table
        """
        if key.table is not child.root.table:
            raise ArgumentError(
                f"Foreign key '{key.name}' does not belong to table '{child.name}'"
            )
        if key.referred_table is not self.root.table:
            raise ArgumentError(
                f"Foreign key '{key.name}' of table '{child.name}' does not reference table '{self.root.name}'"
            )
        key_name = key.name or "_".join(key.column_keys)
        path = type(self)(
            db_metadata=self.db_metadata,
            table_name=f"{child.name}_{key_name}",
            aliased=self,
        )
        object.__setattr__(path, "path_child", child)
        object.__setattr__(path, "path_key", key)
        return path

    @property
    def path_condition(self) -> ColumnElement:
        """
        ON clause joining the child of a join path to this alias
        """
        if self.path_child is None or self.path_key is None:
            raise ArgumentError(f"Table definition '{self.name}' is not a join path")
        child_table = self.path_child.table
        return and_(
            *(
                child_table.c[element.parent.name] == self.table.c[element.column.name]
                for element in self.path_key.elements
            )
        )

    def path_join(self, isouter: bool = False) -> Join:
        condition = self.path_condition
        child = cast(TableDefinition, self.path_child)
        return child.table.join(self.table, condition, isouter=isouter)


class DBEntity(BaseModel):
    """
    Base pydantic entity model. Represents a DB entity converted from raw Database row result.

    Note: a subclass of DBEntity need to conform two restrictions determined by the Table schema it's associated to:
    1. all field names is subset of table's column names
    2. python type of each field is exactly same as corresponding table column's python type
    with the exception of field's nullability

    These any newly implemented subclass of DBEntity should be tested
    via :func:`pricingdb.commons.test_unit.database.utils.validation_db_entity_and_table_schema`
    """

    model_config = ConfigDict(frozen=True)  # Immutable

    @classmethod
    def from_row(cls, row: Mapping):
        """
        Construct a Pydantic Model from a row/mapping, ignoring extra fields
        """
        return cls(**{name: row[name] for name in cls.model_fields if name in row})

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)

        # Does not allow specifying an instance of DB entity without any specified field value
        if type(self).model_fields and (not self.model_fields_set):
            raise ValueError(
                f"At least 1 field need to be specified in model={type(self)}"
            )

        # validate if an optional field is set to None by user and throw error if it is not allowed to do so
        for field in self.model_fields_set:
            if (
                getattr(self, field) is None
                and field in type(self).not_allow_set_none_fields()
            ):
                raise ValueError(f"{field} is not allowed to set as None")

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs):
        # enforce only None is allowed as default in DB entity
        # since we rely on .model_dump(exclude_unset=True) to avoid unexpected behavior
        for name, field in cls.model_fields.items():
            if not field.is_required() and field.default is not None:
                raise ValueError(
                    f"only default=None is allowed for field, "
                    f"but found field={name} default={field.default} model={cls}"
                )

    @classmethod
    def not_allow_set_none_fields(cls) -> List[str]:
        """
        Override this to provide set of fields that are not allowed to specified as None.
        When specifying a field as Optional, this means user can leave the field unset.
        But this doesn't mean underlying consumer of this model accept None value on this field.
        """
        return []
