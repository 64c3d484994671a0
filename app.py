"""
app.py — Workout Planner Studio
Streamlit wizard that collects preferences, generates a plan, takes
feedback, and keeps saved plans in local storage.
"""

import logging
import os
import time as time_module

import streamlit as st

from exercise_catalog import CATALOG
from plan_store import DEFAULT_STORE_PATH, LocalStorage, PlanStore, PlanStoreError
from workout_logic import (
    ALL, DIFFICULTIES, EQUIPMENT_OPTIONS, GOALS, MAX_DURATION, MIN_DURATION,
    MUSCLE_GROUPS, SATISFACTION_LEVELS, WORKOUT_TYPES,
    exercise_tips, humanize, plan_title, volume_label,
)
import wizard
from wizard import (
    BODY_PART_GROUPS, STEP_BASIC_INFO, STEP_EQUIPMENT, STEP_FEEDBACK, STEP_GENDER,
    STEP_GOALS, STEP_MUSCLE_GROUPS, STEP_PLAN, STEP_THANKS, STEP_TITLES,
)

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────
# Page Config
# ─────────────────────────────────────────────

st.set_page_config(
    page_title="Workout Planner Studio",
    page_icon="🏋️",
    layout="centered",
    initial_sidebar_state="expanded",
)

# ─────────────────────────────────────────────
# Custom Styling
# ─────────────────────────────────────────────

st.markdown("""
<style>
    .stApp {
        background: linear-gradient(135deg, #eef2ff 0%, #f5e8ff 100%);
    }

    /* Exercise card */
    .exercise-card {
        background: rgba(255,255,255,0.7);
        border-radius: 12px;
        padding: 1rem 1.2rem;
        margin-bottom: 0.6rem;
        box-shadow: 0 2px 8px rgba(0,0,0,0.06);
        border-left: 4px solid #6366f1;
    }
    .exercise-card h4 { margin: 0 0 0.3rem 0; color: #312e81; }
    .exercise-card .meta { color: #4338ca; font-size: 0.85rem; }

    .studio-header { text-align: center; padding: 1rem 0 0.5rem 0; }
    .studio-header h1 { color: #312e81; font-weight: 600; font-size: 2.1rem; }
    .studio-header p { color: #4338ca; font-style: italic; }
</style>
""", unsafe_allow_html=True)


# ─────────────────────────────────────────────
# Settings & Storage
# ─────────────────────────────────────────────

def get_setting(name: str, default):
    """Read a value from Streamlit secrets, tolerating a missing secrets file."""
    try:
        return st.secrets.get(name, default)
    except FileNotFoundError:
        return default


@st.cache_resource
def get_plan_store() -> PlanStore:
    path = get_setting("plan_store_path", "") or os.environ.get("WORKOUT_PLANNER_STORE", "")
    storage = LocalStorage(path or DEFAULT_STORE_PATH)
    logger.info("Saved plans stored in %s", storage.path)
    return PlanStore(storage)


NAV_BUILD = "🧭 Build a Plan"
NAV_SAVED = "📖 Saved Plans"
GENERATION_DELAY = float(get_setting("generation_delay_seconds", 1.5))


# ─────────────────────────────────────────────
# Session State Initialization
# ─────────────────────────────────────────────

DEFAULTS = {
    "wizard": wizard.restart(),
    "saved_plans": None,
    "view": "planner",         # "planner", "saved"
}
for key, val in DEFAULTS.items():
    if key not in st.session_state:
        st.session_state[key] = val

store = get_plan_store()
if st.session_state.saved_plans is None:
    st.session_state.saved_plans = store.load()


def set_wizard(state):
    st.session_state.wizard = state
    st.rerun()


def with_loading(func, *args):
    """Run a plan-building transition behind the loading spinner."""
    with st.spinner("Generating your workout plan..."):
        if GENERATION_DELAY > 0:
            time_module.sleep(GENERATION_DELAY)
        return func(*args)


def load_plan(saved):
    st.session_state.wizard = wizard.load_saved_plan(st.session_state.wizard, saved)
    st.session_state.nav = NAV_BUILD


def show_errors(state):
    for message in state.errors.values():
        st.error(message)


# ─────────────────────────────────────────────
# Sidebar
# ─────────────────────────────────────────────

with st.sidebar:
    st.markdown("## 🏋️ Planner")
    st.markdown("---")

    nav = st.radio(
        "Navigate",
        [NAV_BUILD, NAV_SAVED],
        key="nav",
        label_visibility="collapsed",
    )
    st.session_state.view = "saved" if nav == NAV_SAVED else "planner"

    st.markdown("---")
    if st.button("↺ Start Over", use_container_width=True):
        set_wizard(wizard.restart())
    st.caption("Workout Planner Studio v1.0")
    st.caption(f"{len(st.session_state.saved_plans)} saved plan(s)")


# ─────────────────────────────────────────────
# Header
# ─────────────────────────────────────────────

st.markdown("""
<div class="studio-header">
    <h1>Workout Planner Studio</h1>
    <p>Tell us about yourself and get a plan built for you</p>
</div>
""", unsafe_allow_html=True)

state = st.session_state.wizard


def render_plan(plan):
    st.markdown(
        f"**{plan_title(plan)}** · {plan.duration} min · "
        f"{humanize(plan.difficulty)} · {len(plan.exercises)} exercises"
    )
    for i, ex in enumerate(plan.exercises):
        meta = [volume_label(ex)]
        if ex.rest:
            meta.append(f"Rest {ex.rest}")
        if ex.muscle_group:
            meta.append(ex.muscle_group)
        st.markdown(
            f"""<div class="exercise-card">
            <h4>{i + 1}. {ex.name}</h4>
            <div class="meta">{' · '.join(m for m in meta if m)}</div>
            </div>""",
            unsafe_allow_html=True,
        )
        with st.expander(f"ℹ️ How to perform {ex.name}"):
            if ex.equipment:
                st.caption(f"Equipment: {', '.join(ex.equipment)}")
            st.markdown(ex.instructions)
            st.markdown("**Tips:**")
            for tip in exercise_tips(ex):
                st.markdown(f"- {tip}")


# ─────────────────────────────────────────────
# View: Saved Plans
# ─────────────────────────────────────────────

if st.session_state.view == "saved":
    st.markdown("### 📖 Your Saved Workout Plans")
    saved_plans = st.session_state.saved_plans

    if not saved_plans:
        st.info("You don't have any saved workout plans yet. "
                "Generate a plan and click \"Save Plan\" to add one!")
    else:
        st.dataframe(store.history().drop(columns=["ID"]),
                     use_container_width=True, hide_index=True)

        for saved in saved_plans:
            with st.container():
                c1, c2, c3 = st.columns([6, 1, 1])
                with c1:
                    st.markdown(f"**{plan_title(saved.plan)}**")
                    st.caption(
                        f"Saved on: {saved.date} · Duration: {saved.plan.duration} min · "
                        f"Difficulty: {humanize(saved.plan.difficulty)} · "
                        f"Exercises: {len(saved.plan.exercises)}"
                    )
                with c2:
                    st.button("Load", key=f"load_{saved.id}", on_click=load_plan, args=(saved,))
                with c3:
                    if st.button("🗑", key=f"delete_{saved.id}", help="Delete this plan"):
                        try:
                            st.session_state.saved_plans = store.delete(saved.id)
                        except PlanStoreError as e:
                            st.warning(f"Delete failed: {e}")
                        else:
                            st.rerun()


# ─────────────────────────────────────────────
# View: Planner Wizard
# ─────────────────────────────────────────────

else:
    if state.step < STEP_PLAN:
        st.progress((state.step + 1) / STEP_PLAN,
                    text=f"Step {state.step + 1} of {STEP_PLAN}")
    st.markdown(f"### {STEP_TITLES[state.step]}")
    prefs = state.preferences

    # --- Step 0: Gender ---
    if state.step == STEP_GENDER:
        st.caption("Choose between 'Male' or 'Female' to get started.")
        col1, col2 = st.columns(2)
        with col1:
            if st.button("👨 Male", use_container_width=True,
                         type="primary" if prefs.gender == "male" else "secondary"):
                set_wizard(wizard.select_gender(state, "male"))
        with col2:
            if st.button("👩 Female", use_container_width=True,
                         type="primary" if prefs.gender == "female" else "secondary"):
                set_wizard(wizard.select_gender(state, "female"))

    # --- Step 1: Basic Information ---
    elif state.step == STEP_BASIC_INFO:
        st.caption("Fill in your details to get a personalized workout plan")
        age = st.text_input("Age", value=prefs.age, placeholder="e.g. 30")
        weight = st.text_input("Weight (kg)", value=prefs.weight, placeholder="e.g. 70")
        duration = st.slider("Workout Duration (min)", MIN_DURATION, MAX_DURATION,
                             prefs.duration, step=5)
        show_errors(state)

        col_back, col_next = st.columns(2)
        with col_back:
            if st.button("← Back", use_container_width=True):
                set_wizard(wizard.go_back(state))
        with col_next:
            if st.button("Next →", type="primary", use_container_width=True):
                set_wizard(wizard.submit_basic_info(state, age, weight, duration))

    # --- Step 2: Equipment ---
    elif state.step == STEP_EQUIPMENT:
        st.caption("Select the equipment you have access to")
        all_selected = len(prefs.equipment) == len(EQUIPMENT_OPTIONS)
        if st.checkbox("Select all equipment", value=all_selected) != all_selected:
            set_wizard(wizard.select_all_equipment(state, not all_selected))

        cols = st.columns(3)
        for i, option in enumerate(EQUIPMENT_OPTIONS):
            tag = option.lower()
            with cols[i % 3]:
                checked = st.checkbox(option, value=tag in prefs.equipment)
                if checked != (tag in prefs.equipment):
                    set_wizard(wizard.toggle_equipment(state, tag, checked))
        show_errors(state)

        col_back, col_next = st.columns(2)
        with col_back:
            if st.button("← Back", use_container_width=True):
                set_wizard(wizard.go_back(state))
        with col_next:
            if st.button("Next →", type="primary", use_container_width=True):
                set_wizard(wizard.submit_equipment(state))

    # --- Step 3: Muscle Groups ---
    elif state.step == STEP_MUSCLE_GROUPS:
        st.caption("Pick the muscle groups to focus on, or tap body parts below")
        all_label = "✅ All" if ALL in prefs.muscle_groups else "All"
        if st.button(all_label, key="mg_all", use_container_width=True):
            set_wizard(wizard.select_all_muscle_groups(state))

        cols = st.columns(2)
        for i, group in enumerate(MUSCLE_GROUPS):
            with cols[i % 2]:
                selected = group in prefs.muscle_groups
                label = f"✅ {group}" if selected else group
                if st.button(label, key=f"mg_{group}", use_container_width=True):
                    set_wizard(wizard.toggle_muscle_group(state, group))

        st.markdown("**Body map**")
        body_parts = list(dict.fromkeys(p for parts in BODY_PART_GROUPS.values() for p in parts))
        part_cols = st.columns(4)
        for i, part in enumerate(body_parts):
            with part_cols[i % 4]:
                marker = "●" if wizard.is_body_part_selected(prefs, part) else "○"
                if st.button(f"{marker} {part}", key=f"bp_{part}", use_container_width=True):
                    set_wizard(wizard.select_body_part(state, part))
        show_errors(state)

        col_back, col_next = st.columns(2)
        with col_back:
            if st.button("← Back", use_container_width=True):
                set_wizard(wizard.go_back(state))
        with col_next:
            if st.button("Next →", type="primary", use_container_width=True):
                set_wizard(wizard.submit_muscle_groups(state))

    # --- Step 4: Goals ---
    elif state.step == STEP_GOALS:
        def index_of(options, value):
            return options.index(value) if value in options else None

        goal = st.selectbox("Fitness Goal", GOALS, index=index_of(GOALS, prefs.goal),
                            format_func=humanize, placeholder="Select your goal")
        workout_type = st.selectbox("Workout Type", WORKOUT_TYPES,
                                    index=index_of(WORKOUT_TYPES, prefs.workout_type),
                                    format_func=humanize, placeholder="Select workout type")
        difficulty = st.radio("Difficulty Level", DIFFICULTIES,
                              index=index_of(DIFFICULTIES, prefs.difficulty),
                              format_func=humanize, horizontal=True)
        show_errors(state)

        col_back, col_next = st.columns(2)
        with col_back:
            if st.button("← Back", use_container_width=True):
                set_wizard(wizard.go_back(state))
        with col_next:
            if st.button("🎲 Generate Plan", type="primary", use_container_width=True):
                set_wizard(with_loading(
                    wizard.submit_goals, state, CATALOG,
                    goal or "", workout_type or "", difficulty or "",
                ))

    # --- Step 5: Plan ---
    elif state.step == STEP_PLAN and state.plan is not None:
        render_plan(state.plan)

        st.markdown("---")
        col_save, col_feedback = st.columns(2)
        with col_save:
            if st.button("💾 Save Plan", use_container_width=True):
                try:
                    store.save(state.plan, state.preferences)
                except PlanStoreError as e:
                    st.warning(f"Save failed: {e}")
                else:
                    st.session_state.saved_plans = store.load()
                    st.toast("Workout plan saved successfully! ✅")
        with col_feedback:
            if st.button("💬 Give Feedback", type="primary", use_container_width=True):
                set_wizard(wizard.start_feedback(state))

    # --- Step 6: Feedback ---
    elif state.step == STEP_FEEDBACK:
        satisfaction = st.radio(
            "How satisfied are you with this plan?",
            list(SATISFACTION_LEVELS.keys()),
            format_func=SATISFACTION_LEVELS.get,
        )
        feedback = st.text_area(
            "Tell us more (optional)",
            placeholder="e.g. Too hard, and I'd like more leg and core work",
        )

        col_back, col_submit = st.columns(2)
        with col_back:
            if st.button("← Back to Plan", use_container_width=True):
                set_wizard(wizard.go_back(state))
        with col_submit:
            if st.button("Submit Feedback", type="primary", use_container_width=True):
                set_wizard(with_loading(
                    wizard.submit_feedback, state, CATALOG, satisfaction, feedback,
                ))

    # --- Step 7: Thank You ---
    elif state.step == STEP_THANKS:
        st.success("Thanks for your feedback! Enjoy your workout. 💪")
        if st.button("🎲 Create Another Plan", type="primary"):
            set_wizard(wizard.restart())

    else:
        set_wizard(wizard.restart())
