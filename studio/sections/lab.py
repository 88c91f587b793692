# studio/sections/lab.py — studio lab cards, studio status, footer
# ----------------------------------------------------------------

from __future__ import annotations
import datetime
from html import escape

import streamlit as st

from studio import config
from studio.catalog import LAB_ITEMS, LabItem
from studio.theme import LAB_KIND_DOT


def _lab_card(item: LabItem) -> str:
    period = f'<p class="muted">Period · {escape(item.period)}</p>' if item.period else ""
    if item.href:
        # external links pass through untouched
        action = f'<a href="{escape(item.href, quote=True)}" target="_blank" rel="noreferrer">{escape(item.cta or "열어보기")}</a>'
    else:
        action = '<span class="muted">케이스 스터디 준비중</span>'
    return (
        '<article class="lab-card">'
        f'<div class="lab-head"><span class="kicker">{escape(item.badge)}</span>'
        f'<span class="dot" style="background:{LAB_KIND_DOT.get(item.kind, "#fcd34d")}"></span></div>'
        f'<h4>{escape(item.title)}</h4>{period}'
        f'<p class="muted">Role · {escape(item.role)}</p>'
        f'<p>{escape(item.summary)}</p>'
        f'<div class="lab-foot"><span>{item.footer_label}</span>{action}</div>'
        '</article>'
    )


def render_lab():
    left, right = st.columns([1, 1])
    with left:
        st.markdown('<p class="kicker">STUDIO LAB</p><h2 class="lab-title">WE LAYER<br/>EXPERIENCE LAB</h2>',
                    unsafe_allow_html=True)
    with right:
        st.markdown('<p class="muted">프리랜서 웹·브랜딩 작업과 제안서를 모아,<br/>'
                    'AENEAS가 문제를 정의하고 경험을 설계하는 방식을 실험하는 구역입니다.</p>'
                    '<p class="kicker">FREELANCE · PROPOSAL · SYSTEM THINKING</p>', unsafe_allow_html=True)
    cols = st.columns(len(LAB_ITEMS))
    for col, item in zip(cols, LAB_ITEMS):
        with col:
            st.markdown(_lab_card(item), unsafe_allow_html=True)


def render_status():
    st.markdown('<p class="kicker">Studio Status</p>', unsafe_allow_html=True)
    st.markdown('1:1 파트너십 위주의 소규모 스튜디오입니다. 2025 상반기에는 '
                '**브랜드·웹 리빌딩 / 포트폴리오 정비**에 집중합니다.')
    c1, c2 = st.columns(2)
    c1.link_button("프로젝트 상의하기", f"mailto:{config.CONTACT_EMAIL}", width="stretch")
    c2.link_button("작업 노트 보기", "#", width="stretch")


def render_footer():
    st.markdown("---")
    st.caption(f"© {datetime.date.today().year} AENEAS Studio. All rights reserved. · Based in Seoul · Working remotely.")
