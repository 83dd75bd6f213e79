"""
Statement builders. Each function returns exactly one SQLAlchemy Core
statement for a ``Resource``; nothing here touches the database.

Values from the request are bound as parameters, never interpolated.
"""
from sqlalchemy import select, insert, update, delete, func


def _match_key(resource, key):
    column = resource.key_column
    if resource.case_insensitive_key:
        return func.lower(column) == func.lower(key)
    return column == key


def select_all(resource, desde=None, hasta=None):
    query = select(resource.table)
    # Both bounds are required, otherwise the list is unfiltered
    if resource.has_date_range and desde and hasta:
        date_column = resource.table.c[resource.date_column]
        query = query.where(date_column.between(desde, hasta))
    return query


def select_one(resource, key):
    return select(resource.table).where(_match_key(resource, key))


def insert_row(resource, body):
    values = {name: body.get(name) for name in resource.fields}
    return insert(resource.table).values(values).returning(*resource.table.c)


def update_row(resource, key, body):
    values = {column: body.get(body_key) for column, body_key in resource.body_fields_for_update().items()}
    return (
        update(resource.table)
        .where(_match_key(resource, key))
        .values(values)
        .returning(*resource.table.c)
    )


def delete_row(resource, key):
    return delete(resource.table).where(_match_key(resource, key)).returning(*resource.table.c)


def select_date_range(resource):
    date_column = resource.table.c[resource.date_column]
    return select(
        func.min(date_column).label("primera_fecha"),
        func.max(date_column).label("ultima_fecha"),
    )
