import streamlit as st
import sys
import os
from datetime import datetime, timedelta

# Load environment variables from .env file
from pathlib import Path
env_path = Path(__file__).parent / '.env'
if env_path.exists():
    with open(env_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#') and '=' in line:
                key, value = line.split('=', 1)
                os.environ[key.strip()] = value.strip()

# Add src directory to Python path
src_path = os.path.join(os.getcwd(), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from routine_ui.config import GeneratorSettings
from routine_ui.data_models import RoutineType
from routine_ui.demo_data import create_sample_apps, create_sample_launch_events, create_sample_predictions
from routine_ui.generator import UIConfigurationGenerator
from routine_ui.insights import InsightGenerator
from routine_ui.layout import focus_bucket
from routine_ui.openai_insight import OpenAIInsightWriter
from routine_ui.routines import infer_routine_type
from routine_ui.themes import contextual_title
from routine_ui.usage import apply_usage

st.set_page_config(page_title="Routine Launcher Preview", page_icon="📱", layout="wide")

# Initialize session state
if 'apps' not in st.session_state:
    st.session_state.apps = create_sample_apps()
    st.session_state.launch_events = create_sample_launch_events()
    st.session_state.template_insights = InsightGenerator()

    # OpenAI API-based insight writer
    try:
        st.session_state.insight_writer = OpenAIInsightWriter()
        st.session_state.llm_available = True
    except (ValueError, RuntimeError) as e:
        st.session_state.insight_writer = None
        st.session_state.llm_available = False
        st.session_state.llm_error = str(e)

    st.session_state.configuration = None

# Header
st.title("📱 Routine-aware Launcher Preview")
st.markdown("**Contextual UI configuration generated from routine, predictions and app usage**")

if st.session_state.get('llm_available', False):
    st.success("🤖 **Insight**: OpenAI API active")
else:
    st.info("💬 **Insight**: Template-based (Set OPENAI_API_KEY environment variable for LLM insights)")

# Sidebar - Context Input
st.sidebar.header("🎯 Context")

reference_date = st.sidebar.date_input("Date", datetime(2025, 9, 25))
reference_hour = st.sidebar.slider("Hour", 0, 23, 8)
reference_minute = st.sidebar.slider("Minute", 0, 59, 30)
reference_time = datetime.combine(reference_date, datetime.min.time()) + timedelta(hours=reference_hour, minutes=reference_minute)

inferred_routine = infer_routine_type(reference_time)
routine_options = [routine.value for routine in RoutineType]
routine_value = st.sidebar.selectbox(
    "Routine",
    routine_options,
    index=routine_options.index(inferred_routine.value),
    help="Defaults to the routine inferred from the selected time",
)
routine = RoutineType(routine_value)

st.sidebar.subheader("⚙️ Generator Settings")
defaults = GeneratorSettings.from_env()
min_confidence = st.sidebar.slider("Minimum Confidence", 0.0, 1.0, defaults.min_confidence, 0.05)
max_actions = st.sidebar.slider("Max Actions", 1, 10, defaults.max_actions)
dark_mode = st.sidebar.toggle("Dark Mode", value=defaults.dark_mode)
use_llm = st.sidebar.checkbox("Use OpenAI insight", value=st.session_state.get('llm_available', False),
                              disabled=not st.session_state.get('llm_available', False))

generator = UIConfigurationGenerator(
    GeneratorSettings(
        min_confidence=min_confidence,
        max_actions=max_actions,
        max_quick_actions=defaults.max_quick_actions,
        dark_mode=dark_mode,
    )
)

apps = apply_usage(st.session_state.apps, st.session_state.launch_events, reference_time=reference_time)
predictions = create_sample_predictions(routine)

# Incremental update keeps the theme when the routine is unchanged
previous = st.session_state.configuration
if previous is None:
    configuration = generator.generate(predictions, routine, apps)
else:
    configuration = generator.update(previous, predictions, routine, apps)
st.session_state.configuration = configuration

if use_llm and st.session_state.insight_writer is not None:
    insight = st.session_state.insight_writer.write(configuration)
else:
    insight = st.session_state.template_insights.build_message(configuration)

theme = configuration.theme
palette = configuration.palette
layout = configuration.layout

st.markdown(f"**Selected Time:** {reference_time.strftime('%Y-%m-%d %H:%M')} · **Routine:** `{routine.value}`")
st.info(f"✨ {insight}")

col1, col2 = st.columns([1, 2])

with col1:
    st.header("🎨 Theme")
    st.metric("Theme", theme.name)
    for label, color in (("Primary", palette.primary), ("Secondary", palette.secondary), ("Tertiary", palette.tertiary)):
        hex_value = color.to_hex()
        st.markdown(
            f"<div style='background:{hex_value};border-radius:{theme.corner_radius:.0f}px;"
            f"padding:10px;color:white;margin-bottom:6px;'>{label} {hex_value}</div>",
            unsafe_allow_html=True,
        )

    st.header("📐 Layout")
    st.metric("Grid Columns", layout.grid_columns)
    st.metric("Spacing", f"{layout.adaptive_spacing:.1f} dp")
    st.metric("Transition", f"{layout.transition_duration_ms} ms")
    st.progress(configuration.focus_level, text=f"Focus: {configuration.focus_level:.3f} ({focus_bucket(configuration.focus_level)})")

    st.header("🧩 Widgets")
    for widget in configuration.widgets:
        st.write(("✅ " if widget.is_visible else "▫️ ") + widget.title)

with col2:
    st.header(contextual_title(routine))
    if configuration.primary_actions:
        for card in configuration.primary_actions:
            with st.container(border=True):
                st.markdown(f"### {card.action}")
                st.caption(f"Confidence {card.confidence:.0%} · visual priority {card.visual_priority}")
                st.write(card.rationale)
                if card.quick_actions:
                    st.write(" · ".join(f"`{quick.label}`" for quick in card.quick_actions))
    else:
        st.info("No prediction passed the confidence threshold.")

    if configuration.secondary_actions:
        st.subheader("Also consider")
        for card in configuration.secondary_actions:
            st.write(f"- {card.action} ({card.confidence:.0%})")

    st.header("📲 App Grid")
    grid = configuration.app_grid
    highlighted = set(grid.highlighted_packages)
    sections = grid.category_groups if grid.group_by_category else (("", grid.ordered_apps),)
    for category, section_apps in sections:
        if category:
            st.subheader(category)
        for start in range(0, len(section_apps), layout.grid_columns):
            cells = st.columns(layout.grid_columns)
            for cell, app in zip(cells, section_apps[start:start + layout.grid_columns]):
                marker = "⭐ " if app.package_name in highlighted else ""
                cell.markdown(f"{marker}**{app.display_name}**  \n{app.usage_count} launches")

if st.session_state.insight_writer is not None:
    with st.expander("🔍 Insight Context", expanded=False):
        st.json(st.session_state.insight_writer.context_summary(configuration))
