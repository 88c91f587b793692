# studio/sections/work.py — selected work: boards, detail panel, zoom viewer
# ----------------------------------------------------------------

from __future__ import annotations
from html import escape
from pathlib import Path

import streamlit as st

from studio import config
from studio.catalog import BOARDS, VisualAsset
from studio.render import board_png
from studio.session import consume_zoom_entrance
from studio.showcase import Showcase
from studio.text import highlight_segments, parse_tools
from studio.theme import HIGHLIGHT, project_accent
from studio.view import ShowcaseView


def show_asset(src: str, caption: str | None = None, w: int = 900, h: int = 600):
    path = config.asset_path(src)
    if path.exists():
        st.image(str(path), caption=caption, width="stretch")
    else:
        seed = Path(src).stem
        st.image(config.PLACEHOLDER_IMAGE.format(seed=seed, w=w, h=h), caption=caption, width="stretch")


def render_boards(showcase: Showcase, view: ShowcaseView):
    st.markdown(
        '<h2 class="section-title">디자인이 아니라, <span class="accent">문제를 푼</span> 프로젝트들</h2>'
        '<p class="muted">각 보드는 한 프로젝트를 위한 작은 시스템 맵입니다.<br/>'
        '포인트 흑돌에는 프로젝트명을, 카드에는 타이틀만 남겼습니다.</p>',
        unsafe_allow_html=True,
    )
    cols = st.columns(len(BOARDS))
    for col, board in zip(cols, BOARDS):
        active = view.board_active[board.project]
        accent = project_accent(board.project)
        with col:
            st.image(board_png(board.project.value, active), width="stretch")
            kicker, sub = board.card_lines
            st.markdown(
                f'<div class="board-tag board-{board.variant}">'
                f'<span style="color:{accent["text"]}">{escape(kicker)}</span>'
                f'<span>{escape(sub)}</span></div>',
                unsafe_allow_html=True,
            )
            if st.button("Click", key=f"board_{board.project.value}",
                         type="primary" if active else "secondary", width="stretch"):
                showcase.select_project(board.project)
                st.rerun()


def _context_html(text: str, phrases) -> str:
    out = []
    for run, marked in highlight_segments(text, phrases):
        run = escape(run)
        out.append(f'<span class="hl" style="color:{HIGHLIGHT};text-decoration-color:{HIGHLIGHT}">{run}</span>' if marked else run)
    return "".join(out)


def render_detail(showcase: Showcase, view: ShowcaseView):
    project = view.project
    if project is None:
        return
    accent = project_accent(project.id)

    head, close = st.columns([12, 1])
    with close:
        if st.button("×", key="close_project", help="닫기"):
            showcase.close_project()
            st.rerun()
    with head:
        meta = []
        if project.period: meta.append(f"<span>Period · {escape(project.period)}</span>")
        if project.client_type: meta.append(f"<span>Client · {escape(project.client_type)}</span>")
        tools = ""
        if project.tools:
            tools = "".join(f"<span class='badge'>{icon} {escape(name)}</span>" for name, icon in parse_tools(project.tools))
        st.markdown(
            f'<p class="kicker">{escape(project.kicker)}</p>'
            f'<h3 style="color:{accent["title"]}">{escape(project.title)}</h3>'
            f'<div class="meta">{"".join(meta)}</div>'
            f'<div class="tools">{tools}</div>'
            f'<p class="muted">Role · {escape(project.role)}</p>',
            unsafe_allow_html=True,
        )

    if st.button(f"{view.toggle_label} {view.toggle_arrow}", key="toggle_detail"):
        showcase.toggle_detail_view()
        st.rerun()

    if view.show_case:
        st.markdown("#### Context & Problem")
        st.markdown(f'<p class="case-body">{_context_html(project.context, project.highlights)}</p>',
                    unsafe_allow_html=True)
        st.markdown("#### Goals")
        st.markdown("\n".join(f"- {g}" for g in project.goals))
        st.markdown("#### Process")
        steps = st.columns(len(project.process))
        for col, step in zip(steps, project.process):
            with col:
                st.markdown(f'<p class="kicker">{escape(step.label)}</p><p class="case-body">{escape(step.body)}</p>',
                            unsafe_allow_html=True)
        st.markdown("#### Outcome")
        st.markdown(f'<p class="case-body">{escape(project.outcome).replace(chr(10), "<br/>")}</p>',
                    unsafe_allow_html=True)
        for link in project.links:
            st.markdown(f"- [{link.label}]({link.href})")

    elif view.show_gallery:
        render_gallery(showcase, view.visuals)


def render_gallery(showcase: Showcase, visuals):
    cols = st.columns(3)
    for i, visual in enumerate(visuals):
        with cols[i % 3]:
            show_asset(visual.src, w=600, h=400)
            if st.button("Click to Zoom", key=f"zoom_{i}", width="stretch"):
                showcase.open_visual(visual)
                st.rerun()
            st.markdown(f"**{visual.title}**")
            st.caption(visual.caption)


def render_zoom(showcase: Showcase, visual: VisualAsset | None):
    """Open the zoom viewer as a large dialog while a visual is zoomed.

    Dismissing the dialog (Esc, the backdrop or its own ×) runs
    ``close_visual`` before the rerun, same as the close button.
    """
    if visual is None:
        return
    enter = " zoom-enter" if consume_zoom_entrance() else ""

    @st.dialog(visual.title or "Detail View", width="large", on_dismiss=showcase.close_visual)
    def viewer():
        st.markdown(f'<div class="zoom-panel{enter}"><p class="kicker">Detail View</p>'
                    f'<p class="muted">{escape(visual.caption)}</p></div>', unsafe_allow_html=True)
        show_asset(visual.src, w=1400, h=900)
        if st.button("닫기 ✕", key="close_visual", width="stretch"):
            showcase.close_visual()
            st.rerun()

    viewer()
