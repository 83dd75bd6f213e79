import json
import os

import httpx
import pandas as pd
import streamlit as st

# --- CONFIGURACIÓN API ---
API_URL = os.getenv("API_URL", "http://localhost:3000")

RESOURCES = ["admin", "staff", "role", "menu", "menuitem", "order", "orderdetail", "reports"]
DATE_RANGE_RESOURCES = {"order", "reports"}
METHODS = ["GET", "POST", "PUT", "DELETE"]

# Ejemplo de cuerpo para POST/PUT de cada recurso
BODY_TEMPLATES = {
    "admin": {"username": "admin", "password": "admin123"},
    "staff": {"username": "mesero1", "password": "1234", "status": "activo", "role": "Mesero"},
    "role": {"role": "Mesero"},
    "menu": {"menuname": "Menú Especial"},
    "menuitem": {"menuid": 1, "menuitemname": "Tacos al pastor", "price": 85.5},
    "order": {"status": "pendiente", "total": 171.0, "order_date": "2025-01-15"},
    "orderdetail": {"orderID": 1, "itemID": 1, "quantity": 2},
    "reports": {"report_date": "2025-01-31", "report_data": "Cierre de mes", "adminid": 1},
}

# --- SESIÓN ---
if 'user_name' not in st.session_state: st.session_state['user_name'] = None
if 'last_response' not in st.session_state: st.session_state['last_response'] = None

st.set_page_config(page_title="Restaurant API Tester", page_icon="🍽️", layout="wide")


def check_login(username, password):
    """The API has no auth endpoint: compare against the admin table."""
    res = httpx.get(f"{API_URL}/admin")
    res.raise_for_status()
    return any(a.get('username') == username and a.get('password') == password for a in res.json())


def send_request(method, resource, key=None, body=None, params=None):
    url = f"{API_URL}/{resource}"
    if key:
        url = f"{url}/{key}"
    res = httpx.request(method, url, json=body, params=params)
    try:
        content = res.json()
    except ValueError:
        content = res.text
    return {"method": method, "url": str(res.url), "status": res.status_code, "body": content}


# ==========================================
# LOGIN
# ==========================================
if st.session_state['user_name'] is None:
    st.title("🍽️ Restaurant API")
    with st.form("login"):
        username = st.text_input("Usuario")
        password = st.text_input("Contraseña", type="password")
        if st.form_submit_button("Entrar"):
            try:
                if check_login(username, password):
                    st.session_state['user_name'] = username
                    st.rerun()
                else:
                    st.error("Usuario o contraseña incorrectos")
            except httpx.HTTPError as e:
                st.error(f"No se pudo conectar con la API: {e}")
    st.stop()

# ==========================================
# API TESTER
# ==========================================
with st.sidebar:
    st.success(f"Hola, {st.session_state['user_name']}")
    st.caption(f"API: {API_URL}")
    if st.button("Cerrar sesión"):
        st.session_state['user_name'] = None
        st.session_state['last_response'] = None
        st.rerun()

st.header("🧪 API Tester")

c1, c2, c3 = st.columns([2, 1, 2])
resource = c1.selectbox("Recurso", RESOURCES)
method = c2.selectbox("Método", METHODS)
key = c3.text_input("ID / clave", help="Vacío para listar o crear. Para role, el nombre del rol.")

params = None
if resource in DATE_RANGE_RESOURCES and method == "GET" and not key:
    d1, d2, d3 = st.columns([2, 2, 1])
    desde = d1.text_input("Desde (YYYY-MM-DD)")
    hasta = d2.text_input("Hasta (YYYY-MM-DD)")
    if desde and hasta:
        params = {"desde": desde, "hasta": hasta}
    if d3.button("Rango de fechas"):
        try:
            st.session_state['last_response'] = send_request("GET", resource, "fechas/rango")
        except httpx.HTTPError as e:
            st.error(f"Error de conexión: {e}")

body = None
if method in ("POST", "PUT"):
    template = dict(BODY_TEMPLATES[resource])
    if resource == "role" and method == "PUT":
        template = {"newRole": "Cocinero"}
    raw_body = st.text_area("Cuerpo JSON", value=json.dumps(template, ensure_ascii=False, indent=2), height=180)
    try:
        body = json.loads(raw_body) if raw_body.strip() else None
    except ValueError as e:
        st.warning(f"JSON inválido: {e}")

if st.button("Enviar", type="primary"):
    if method in ("PUT", "DELETE") and not key:
        st.warning("Este método necesita un ID.")
    else:
        try:
            st.session_state['last_response'] = send_request(method, resource, key or None, body, params)
        except httpx.HTTPError as e:
            st.error(f"Error de conexión: {e}")

response = st.session_state['last_response']
if response:
    st.divider()
    st.markdown(f"**{response['method']}** `{response['url']}` → **{response['status']}**")
    if isinstance(response['body'], list):
        if response['body']:
            st.dataframe(pd.DataFrame(response['body']), use_container_width=True)
        else:
            st.info("Sin registros.")
    else:
        st.json(response['body'])
