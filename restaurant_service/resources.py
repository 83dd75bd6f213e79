"""
Declarative table of the resources exposed by the API.

Each ``Resource`` describes one table: where it is mounted, which column is
its key, which body fields it writes, and the messages returned to clients.
The routes themselves are built generically in ``routes.py``.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from restaurant_service import models


@dataclass
class Resource:
    path: str
    model: type
    key: str
    fields: List[str]
    not_found: Dict[str, str]
    deleted: str
    # column -> body key used on PUT, when it differs from the column name
    update_fields: Optional[Dict[str, str]] = None
    date_column: Optional[str] = None
    case_insensitive_key: bool = False
    # body key under which DELETE echoes the removed row
    deleted_key: Optional[str] = None
    summary: str = ""

    @property
    def table(self):
        return self.model.__table__

    @property
    def key_column(self):
        return self.table.c[self.key]

    @property
    def has_date_range(self):
        return self.date_column is not None

    def body_fields_for_update(self):
        if self.update_fields is not None:
            return self.update_fields
        return {name: name for name in self.fields}

    def not_found_message(self, operation, key):
        template = self.not_found.get(operation, self.not_found["get"])
        return template.format(key=key)

    def deleted_message(self, key):
        return self.deleted.format(key=key)


def _same_message(message):
    return {"get": message, "update": message, "delete": message}


RESOURCES = [
    Resource(
        path="admin",
        model=models.Admin,
        key="id",
        fields=["username", "password"],
        not_found=_same_message("Administrador no encontrado"),
        deleted="Admin eliminado",
        summary="Administradores",
    ),
    Resource(
        path="menu",
        model=models.Menu,
        key="menuid",
        fields=["menuname"],
        not_found=_same_message("Menu no encontrado"),
        deleted="Menu eliminado correctamente",
        summary="Menús",
    ),
    Resource(
        path="menuitem",
        model=models.MenuItem,
        key="itemid",
        fields=["menuid", "menuitemname", "price"],
        not_found=_same_message("Menu item no encontrado"),
        deleted="Menu item eliminado correctamente",
        summary="Platillos de un menú",
    ),
    Resource(
        path="order",
        model=models.Order,
        key="orderID",
        fields=["status", "total", "order_date"],
        not_found={
            "get": "Orden no encontrada",
            "update": "Orden no encontrada para actualizar",
            "delete": "Orden no encontrada para eliminar",
        },
        deleted="Orden eliminada correctamente",
        date_column="order_date",
        deleted_key="deletedOrder",
        summary="Órdenes",
    ),
    Resource(
        path="orderdetail",
        model=models.OrderDetail,
        key="orderDetailID",
        fields=["orderID", "itemID", "quantity"],
        not_found={
            "get": "Detalle de orden no encontrado",
            "update": "Detalle de orden no encontrado para actualizar",
            "delete": "Detalle de orden no encontrado para eliminar",
        },
        deleted="Detalle de orden eliminado correctamente",
        deleted_key="deletedOrderDetail",
        summary="Detalles de orden",
    ),
    Resource(
        path="staff",
        model=models.Staff,
        key="staffid",
        fields=["username", "password", "status", "role"],
        not_found=_same_message("Empleado no encontrado"),
        deleted="Empleado eliminado correctamente",
        summary="Empleados",
    ),
    Resource(
        path="reports",
        model=models.Report,
        key="reportID",
        fields=["report_date", "report_data", "adminid"],
        not_found=_same_message("Reporte no encontrado"),
        deleted="Reporte eliminado correctamente",
        date_column="report_date",
        summary="Reportes",
    ),
    Resource(
        path="role",
        model=models.Role,
        key="role",
        # The key is the only column and is supplied by the client
        fields=["role"],
        update_fields={"role": "newRole"},
        not_found={
            "get": 'Rol "{key}" no encontrado',
            "update": 'Rol "{key}" no encontrado para actualizar',
            "delete": 'Rol "{key}" no encontrado para eliminar',
        },
        deleted='Rol "{key}" eliminado correctamente',
        case_insensitive_key=True,
        summary="Roles",
    ),
]

RESOURCES_BY_PATH = {resource.path: resource for resource in RESOURCES}
