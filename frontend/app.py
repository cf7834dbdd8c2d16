import streamlit as st
import requests, json
import os
import time
import pandas as pd
from io import BytesIO
from dotenv import load_dotenv

from frontend.formatting import (
    format_list_item,
    organize_fields_by_category,
    schema_icon,
    to_clipboard_text,
)

load_dotenv()

# --------------------------------------------------
# CONFIG
# --------------------------------------------------

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")

API_PING = f"{BACKEND_URL}/api/ping"
API_INSPECT = f"{BACKEND_URL}/api/inspect"

PING_TIMEOUT = 5
INSPECT_TIMEOUT = 300
MAX_INPUTS = 5

st.set_page_config(
    page_title="Schema Markup Inspector",
    layout="wide"
)

# --------------------------------------------------
# SESSION STATE
# --------------------------------------------------

defaults = {
    "urls": [],
    "htmls": [],
    "results": {},
}

for k, v in defaults.items():
    if k not in st.session_state:
        st.session_state[k] = v

# --------------------------------------------------
# API HELPERS
# --------------------------------------------------

def backend_ready() -> bool:
    """
    Ping the inspector, retrying once after a short pause.
    """
    for attempt in range(2):
        try:
            r = requests.get(API_PING, timeout=PING_TIMEOUT)
            if r.status_code == 200 and r.json().get("ready"):
                return True
        except requests.RequestException:
            pass

        if attempt == 0:
            time.sleep(1)

    return False


def call_inspect_api(payload):
    r = requests.post(API_INSPECT, json=payload, timeout=INSPECT_TIMEOUT)

    if r.status_code != 200:
        raise Exception(r.text)

    return r.json()


# --------------------------------------------------
# EXCEL EXPORT
# --------------------------------------------------

def build_excel(results_map):

    output = BytesIO()

    with pd.ExcelWriter(output, engine="xlsxwriter") as writer:

        workbook = writer.book

        header = workbook.add_format({
            "bold": True,
            "border": 1,
            "align": "center",
            "fg_color": "#E7F3FF"
        })

        # ---------- SUMMARY ----------
        summary_rows = []

        for source, page in results_map.items():
            summary_rows.append({
                "Source": source,
                "Schema Types": page.get("total_types", 0),
                "Types": ", ".join(page.get("data", {}).keys()),
                "Error": page.get("error", "")
            })

        df_summary = pd.DataFrame(summary_rows)
        df_summary.to_excel(
            excel_writer=writer,
            sheet_name="Summary",
            index=False
        )

        sheet = writer.sheets["Summary"]

        for col, name in enumerate(df_summary.columns):
            sheet.write(0, col, name, header)
            sheet.set_column(col, col, 32)

        sheet.freeze_panes(1, 0)

        # ---------- FIELDS ----------
        field_rows = []

        for source, page in results_map.items():

            for schema_type, data in page.get("data", {}).items():

                for group, fields in organize_fields_by_category(data).items():

                    for field in fields:
                        value = field["value"]

                        if field["is_list"]:
                            value = "\n".join(format_list_item(v) for v in value)

                        field_rows.append({
                            "Source": source,
                            "Schema": schema_type,
                            "Group": group,
                            "Field": field["key"],
                            "Value": str(value)
                        })

        df_fields = pd.DataFrame(field_rows)
        df_fields.to_excel(
            excel_writer=writer,
            sheet_name="Fields",
            index=False
        )

        sheet = writer.sheets["Fields"]

        for col, name in enumerate(df_fields.columns):
            sheet.write(0, col, name, header)
            sheet.set_column(col, col, 36)

        sheet.freeze_panes(1, 0)

    output.seek(0)
    return output


# --------------------------------------------------
# RENDERING
# --------------------------------------------------

def render_schema(source, schema_type, data):

    with st.expander(f"{schema_icon(schema_type)} {schema_type}"):

        for group, fields in organize_fields_by_category(data).items():

            if not fields:
                continue

            st.markdown(f"**{group}**")

            for field in fields:
                value = field["value"]

                if field["is_list"]:
                    st.markdown(f"`{field['key']}`")
                    for item in value:
                        st.text(format_list_item(item))
                elif field["is_url"]:
                    st.markdown(f"`{field['key']}`: {value}")
                else:
                    text = str(value)
                    if len(text) > 200:
                        expanded = st.toggle(
                            "Show more",
                            key=f"more_{source}_{schema_type}_{field['key']}"
                        )
                        shown = text if expanded else f"{text[:200]}..."
                        st.markdown(f"`{field['key']}`: {shown}")
                    else:
                        st.markdown(f"`{field['key']}`: {text}")


# --------------------------------------------------
# UI
# --------------------------------------------------

st.title("🔎 Schema Markup Inspector")
st.caption("JSON-LD • Microdata • RDFa")

st.divider()

mode = st.radio("Choose Input", ["URL", "Raw HTML"], horizontal=True)

# --------------------------------------------------
# INPUT
# --------------------------------------------------

if mode == "URL":

    col1, col2 = st.columns([4, 1])

    with col1:
        new_url = st.text_input("Add URL")

    with col2:
        st.write("")
        if st.button("➕ Add", disabled=len(st.session_state.urls) >= MAX_INPUTS):
            if new_url and new_url not in st.session_state.urls:
                st.session_state.urls.append(new_url)

    st.caption(f"URLs added: {len(st.session_state.urls)} / {MAX_INPUTS}")

    for i, url in enumerate(st.session_state.urls):
        c1, c2 = st.columns([9, 1])
        c1.write(url)

        if c2.button("❌", key=f"remove_url_{i}"):
            st.session_state.urls.pop(i)

else:

    new_html = st.text_area("Paste HTML", height=180)

    if st.button("➕ Add HTML", disabled=len(st.session_state.htmls) >= MAX_INPUTS):
        if new_html.strip():
            st.session_state.htmls.append(new_html)

    st.caption(f"HTMLs added: {len(st.session_state.htmls)} / {MAX_INPUTS}")

    for i, _ in enumerate(st.session_state.htmls):
        c1, c2 = st.columns([9, 1])
        c1.code(f"HTML {i+1}")

        if c2.button("❌", key=f"remove_html_{i}"):
            st.session_state.htmls.pop(i)

st.divider()

# --------------------------------------------------
# RUN INSPECTION
# --------------------------------------------------

disabled = (
    (mode == "URL" and not st.session_state.urls) or
    (mode == "Raw HTML" and not st.session_state.htmls)
)

if st.button("🚀 Inspect", width="stretch", disabled=disabled):

    if not backend_ready():
        st.error("Inspector is not responding. Check that the API is running and try again.")
        st.stop()

    payload = {}

    if mode == "URL":
        payload["urls"] = st.session_state.urls
    else:
        payload["htmls"] = st.session_state.htmls

    try:
        with st.spinner("Analyzing page for schema markup..."):
            result = call_inspect_api(payload)

    except requests.Timeout:
        st.error("Inspection timed out. Try again with fewer pages.")
        st.stop()

    except Exception as e:
        st.error(f"Inspection failed:\n{e}")
        st.stop()

    st.session_state.results = result.get("results", {})


# --------------------------------------------------
# DISPLAY RESULTS
# --------------------------------------------------

for source, page in st.session_state.results.items():

    with st.container(border=True):

        st.subheader(f"🔗 {source}")

        if not page.get("success", False):
            st.error(page.get("error", "Unknown error"))
            continue

        record = page.get("data", {})

        if not record:
            st.info("No schema markup found on this page")
            continue

        st.success(f"Found {len(record)} schema types")

        for schema_type, data in record.items():
            render_schema(source, schema_type, data)

        c1, c2 = st.columns(2)

        c1.download_button(
            "Download JSON",
            data=json.dumps(record, indent=2, ensure_ascii=False),
            file_name=f"schema_{source.replace('/', '_')}.json",
            mime="application/json",
            key=f"json_{source}"
        )

        c2.download_button(
            "Download Text",
            data=to_clipboard_text(record),
            file_name=f"schema_{source.replace('/', '_')}.txt",
            mime="text/plain",
            key=f"text_{source}"
        )


# --------------------------------------------------
# GLOBAL EXCEL
# --------------------------------------------------

if st.session_state.results:

    excel = build_excel(st.session_state.results)

    st.download_button(
        "📊 Download Full Inspection Excel",
        data=excel,
        file_name="schema_inspection.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
