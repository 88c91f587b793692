# studio/sections/modes.py — constellation cards + visual panel tabs
# ----------------------------------------------------------------

from __future__ import annotations
from html import escape

import streamlit as st

from studio import config
from studio.catalog import MODES
from studio.render import constellation_png
from studio.showcase import Showcase
from studio.theme import mode_card_style
from studio.view import ShowcaseView


def render_constellation(showcase: Showcase, view: ShowcaseView):
    st.markdown(
        '<div class="machine-frame"><div class="frame-head">'
        '<div><p class="kicker">AENEAS CONSTELLATION</p>'
        '<p class="muted">사막에서 그린 플레이스로 향하는 세 가지 별자리 모드입니다.</p></div>'
        f'<span class="kicker">MODES · {len(MODES):02d}</span></div></div>',
        unsafe_allow_html=True,
    )
    if config.SHOW_CONSTELLATION_CHART:
        st.image(constellation_png(view.mode.id.value), width="stretch")

    cols = st.columns(len(MODES))
    for col, (mode_id, mode) in zip(cols, MODES.items()):
        active = mode_id is view.mode.id
        with col:
            st.markdown(
                f'<div class="mode-card" style="{mode_card_style(mode_id, active)}">'
                f'<p class="kicker">{escape(mode.section_label)}</p>'
                f'<h4>{escape(mode.heading.replace(" Lab", ""))}</h4>'
                f'<p class="muted">{escape(mode.card_blurb)}</p></div>',
                unsafe_allow_html=True,
            )
            if st.button("Selected" if active else "Select", key=f"mode_card_{mode_id.value}",
                         type="primary" if active else "secondary", width="stretch"):
                showcase.select_mode(mode_id)
                st.rerun()


def render_visual_panel(showcase: Showcase, view: ShowcaseView):
    mode = view.mode
    st.markdown('<p class="kicker">CONSTELLATION PANEL</p>', unsafe_allow_html=True)

    # tab rail
    tabs = st.columns(len(MODES))
    for col, (mode_id, m) in zip(tabs, MODES.items()):
        with col:
            if st.button(m.tab_label, key=f"mode_tab_{mode_id.value}",
                         type="primary" if mode_id is mode.id else "secondary", width="stretch"):
                showcase.select_mode(mode_id)
                st.rerun()

    st.markdown(
        f'<div class="mode-chip" style="border-color:{mode.accent_color};box-shadow:0 0 26px {mode.accent_color}B3;">'
        f'<span class="dot" style="background:{mode.accent_color}"></span>{escape(mode.chip_label)}</div>',
        unsafe_allow_html=True,
    )

    left, right = st.columns([1, 2])
    with left:
        st.markdown(
            '<div class="radar-target" '
            f'style="background-image:radial-gradient(circle at center, {mode.core_color}, transparent 70%);">'
            f'<span>{escape(mode.title_in_target)}</span></div>',
            unsafe_allow_html=True,
        )
    with right:
        bullets = "".join(f"<li>{escape(b)}</li>" for b in view.mode_bullets)
        st.markdown(
            '<div class="mode-text">'
            f'<p class="kicker">{escape(mode.section_label)}</p>'
            f'<h3>{escape(mode.heading)}</h3>'
            f'<p>{escape(mode.body)}</p>'
            f'<ul>{bullets}</ul>'
            f'<div class="mode-foot"><span>Focus · <b>{escape(mode.focus)}</b></span>'
            f'<span><span class="dot" style="background:{mode.accent_color}"></span>{escape(mode.status_label)}</span></div>'
            '</div>',
            unsafe_allow_html=True,
        )

    c1, c2 = st.columns(2)
    c1.metric("MODE", "Concept Lab Studio")
    c2.metric("ROUTE", mode.route_label, mode.status_label, delta_color="off")
