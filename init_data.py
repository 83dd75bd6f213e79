import asyncio
import os

import httpx

# --- CONFIGURACIÓN ---
API_URL = os.getenv("API_URL", "http://localhost:3000")

ROLES = ["Administrador", "Mesero", "Cocinero"]

STAFF = [
    {"username": "mesero1", "password": "1234", "status": "activo", "role": "Mesero"},
    {"username": "cocinero1", "password": "1234", "status": "activo", "role": "Cocinero"},
]

MENUS = {
    "Menú Especial": [
        {"menuitemname": "Tacos al pastor", "price": 85.5},
        {"menuitemname": "Enchiladas verdes", "price": 95.0},
    ],
    "Bebidas": [
        {"menuitemname": "Agua de horchata", "price": 30.0},
    ],
}

ORDERS = [
    {"status": "pagada", "order_date": "2025-01-10", "items": [(0, 2), (2, 2)]},
    {"status": "pendiente", "order_date": "2025-01-20", "items": [(1, 1)]},
]


async def create(client, resource, payload):
    """POST one row; returns the created row or None."""
    try:
        res = await client.post(f"{API_URL}/{resource}", json=payload)
        if res.status_code == 201:
            return res.json()
        print(f"   ⚠️ {resource}: {res.status_code} {res.text}")
    except httpx.HTTPError as e:
        print(f"   ❌ {resource}: {e}")
    return None


async def seed_data():
    print("🚀 CREANDO DATOS DE DEMO...")

    async with httpx.AsyncClient(timeout=30.0) as client:

        # 1. ADMINISTRADOR
        print("\n👤 [1] ADMINISTRADOR...")
        admin = await create(client, "admin", {"username": "admin", "password": "admin123"})
        if not admin:
            return print("Error: no se pudo crear el administrador.")
        print(f"   ✅ admin (ID: {admin['id']})")

        # 2. ROLES Y EMPLEADOS
        print("\n👔 [2] ROLES Y EMPLEADOS...")
        for role in ROLES:
            if await create(client, "role", {"role": role}):
                print(f"   ✅ Rol: {role}")
        for member in STAFF:
            row = await create(client, "staff", member)
            if row:
                print(f"   ✅ Empleado: {row['username']} (ID: {row['staffid']})")

        # 3. MENÚS Y PLATILLOS
        print("\n🍛 [3] MENÚS...")
        items = []
        for menu_name, menu_items in MENUS.items():
            menu = await create(client, "menu", {"menuname": menu_name})
            if not menu:
                continue
            print(f"   ✅ {menu_name} (ID: {menu['menuid']})")
            for item in menu_items:
                row = await create(client, "menuitem", {"menuid": menu["menuid"], **item})
                if row:
                    items.append(row)
                    print(f"      🍽️ {row['menuitemname']} - ${row['price']}")

        # 4. ÓRDENES Y DETALLES
        print("\n🧾 [4] ÓRDENES...")
        for order in ORDERS:
            lines = [(items[i], qty) for i, qty in order["items"] if i < len(items)]
            total = round(sum(float(item["price"]) * qty for item, qty in lines), 2)
            row = await create(client, "order", {
                "status": order["status"], "total": total, "order_date": order["order_date"]
            })
            if not row:
                continue
            print(f"   ✅ Orden #{row['orderID']} ({order['order_date']}): ${total}")
            for item, qty in lines:
                await create(client, "orderdetail", {
                    "orderID": row["orderID"], "itemID": item["itemid"], "quantity": qty
                })

        # 5. REPORTE
        print("\n📊 [5] REPORTE...")
        res = await client.get(f"{API_URL}/order/fechas/rango")
        rango = res.json() if res.status_code == 200 else {}
        report = await create(client, "reports", {
            "report_date": rango.get("ultima_fecha") or "2025-01-31",
            "report_data": f"Órdenes entre {rango.get('primera_fecha')} y {rango.get('ultima_fecha')}",
            "adminid": admin["id"],
        })
        if report:
            print(f"   ✅ Reporte #{report['reportID']}")

    print("\n-------------------------------------")
    print("🎉 DATOS CREADOS")
    print("👉 Login: admin / admin123")
    print("-------------------------------------")


if __name__ == "__main__":
    asyncio.run(seed_data())
