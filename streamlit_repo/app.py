# app.py — AENEAS Studio (single scroll): hero, constellation, selected work, lab
# ----------------------------------------------------------------
# Run with:  streamlit run streamlit_repo/app.py
#  • All interactive state lives in one Showcase per session (studio.session)
#  • Sections render from a read-only view of that state (studio.view)
# ----------------------------------------------------------------

from __future__ import annotations

import streamlit as st
from streamlit.components.v1 import html as st_html

from studio import config
from studio.log import configure_logging
from studio.session import get_showcase, set_pending_jump, consume_pending_jump
from studio.view import build_view
from studio.sections.modes import render_constellation, render_visual_panel
from studio.sections.work import render_boards, render_detail, render_zoom
from studio.sections.lab import render_lab, render_status, render_footer

configure_logging()

# -----------------------------
# Page config + CSS
# -----------------------------
st.set_page_config(
    page_title="AENEAS Studio — Brand & Web Direction",
    page_icon="🌵",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown("""
<style>
/* Hero heading + subheading */
.hero {
  font-weight: 800;
  line-height: 1.1;
  margin: 0 0 10px;
  letter-spacing: .2px;
  font-size: clamp(28px, 3.6vw, 48px);
}
.hero-sub {
  font-size: clamp(16px, 1.2vw, 18px);
  line-height: 1.6;
  opacity: .9;
  max-width: 62ch;
}
.chip {
  display: inline-block;
  margin: 10px 8px 0 0;
  padding: 4px 12px;
  border: 1px solid rgba(255,255,255,.25);
  border-radius: 999px;
  font-size: 13px;
}
@media (max-width: 700px) {
  .hero { font-size: 26px; }
  .hero-sub { font-size: 16px; }
}

.kicker {
  font-size: 12px;
  letter-spacing: .22em;
  text-transform: uppercase;
  color: #a1a1aa;
  margin: 0;
}
.muted { color: #a1a1aa; font-size: 14px; line-height: 1.6; }
.dot { display: inline-block; width: 9px; height: 9px; border-radius: 50%; margin-right: 8px; }

/* machine frame around the constellation */
.machine-frame {
  background: #171717;
  border: 1px solid #757575;
  border-radius: 5px;
  box-shadow: inset 1px 1px 2px rgba(255,255,255,0.25), 0 0 0 1px rgba(255,255,255,0.3);
  padding: 14px 18px;
}
.machine-frame .frame-head { display: flex; justify-content: space-between; align-items: flex-start; }

.mode-card {
  border: 1px solid #3F3F46;
  border-radius: 16px;
  padding: 14px 16px;
  min-height: 150px;
  transition: all .5s cubic-bezier(0.16,1,0.3,1);
}
.mode-chip {
  display: inline-flex;
  align-items: center;
  margin: 14px 0;
  padding: 10px 20px;
  border: 1px solid;
  border-radius: 16px;
  background: #000;
}
.radar-target {
  min-height: 260px;
  border: 1px solid #3f3f46;
  border-radius: 16px;
  display: flex; align-items: center; justify-content: center;
  font-size: 11px; letter-spacing: .28em;
}
.mode-text {
  border: 1px solid #3f3f46;
  border-radius: 16px;
  padding: 24px 28px;
  min-height: 260px;
}
.mode-foot { display: flex; justify-content: space-between; color: #71717a; font-size: 14px; }

.section-title { font-weight: 700; font-size: clamp(22px, 2.4vw, 34px); }
.section-title .accent { color: #F6FF6B; }
.board-tag {
  display: flex; justify-content: space-between;
  margin: -6px auto 8px;
  padding: 10px 18px;
  border: 1px solid rgba(255,255,255,.7);
  border-radius: 8px;
  font-size: 12px; letter-spacing: .16em;
}
.board-wide { width: 72%; }
.board-narrow { width: 64%; }

.case-body { font-size: 15px; line-height: 1.75; }
.hl { text-decoration: underline; text-underline-offset: 4px; }
.meta span { margin-right: 18px; font-size: 13px; color: #a1a1aa; }
.badge {
  display: inline-block;
  margin: 6px 6px 0 0;
  padding: 2px 10px;
  border: 1px solid rgba(255,255,255,.2);
  border-radius: 999px;
  font-size: 12px;
}

/* zoom viewer: entrance only right after opening */
.zoom-panel { border-top: 1px solid #3f3f46; padding-top: 10px; }
.zoom-enter { animation: zoom-in .5s cubic-bezier(0.16,1,0.3,1) .5s both; }
@keyframes zoom-in {
  from { opacity: 0; transform: scale(.6) translateY(40px); }
  to   { opacity: 1; transform: scale(1) translateY(0); }
}

.lab-title { font-size: clamp(34px, 4.4vw, 56px); line-height: 1.05; font-weight: 600; }
.lab-card {
  border: 1px solid #3f3f46;
  border-radius: 16px;
  padding: 20px 22px;
  background: rgba(9,9,11,.85);
  min-height: 360px;
}
.lab-head, .lab-foot { display: flex; justify-content: space-between; align-items: center; }
.lab-foot { font-size: 13px; color: #a1a1aa; margin-top: 12px; }
</style>
""", unsafe_allow_html=True)

SECTION_IDS = {"hero": "sec-hero", "work": "sec-work", "lab": "sec-lab", "status": "sec-status"}


# -----------------------------
# Helpers (scroll)
# -----------------------------
def js_scroll_to_anchor(anchor_id: str):
    st_html(
        f"""
<script>
(function(){{
  const root = window.parent.document;
  const targetId = "{anchor_id}";
  function scrollNow() {{
    const el = root.getElementById(targetId);
    if (el) {{
      el.scrollIntoView({{behavior:'smooth', block:'start'}});
      return true;
    }}
    return false;
  }}
  if (!scrollNow()) {{
    const obs = new MutationObserver(() => {{ if (scrollNow()) obs.disconnect(); }});
    obs.observe(root, {{childList:true, subtree:true}});
    setTimeout(() => {{ scrollNow(); }}, 400);
  }}
}})();
</script>
""",
        height=0,
    )


def anchor(key: str):
    st.markdown(f"<div id='{SECTION_IDS[key]}'></div>", unsafe_allow_html=True)


# -----------------------------
# Sidebar
# -----------------------------
st.sidebar.title("Navigate")
for label, key in [("Studio", "hero"), ("Selected Work", "work"), ("Studio Lab", "lab"), ("Contact", "status")]:
    if st.sidebar.button(label, key=f"nav_{key}", width="stretch"):
        set_pending_jump(SECTION_IDS[key]); st.rerun()


# -----------------------------
# HOME (single page)
# -----------------------------
def render_hero():
    anchor("hero")
    logo = config.ASSETS / "aeneas-logo-white.png"
    if logo.exists():
        st.image(str(logo), width=220)
    else:
        st.markdown('<p class="kicker">AENEAS · Studio</p>', unsafe_allow_html=True)
    st.markdown('<div class="hero">Brands that walk through the desert into their next green place.</div>',
                unsafe_allow_html=True)
    st.markdown(
        '<div class="hero-sub">'
        'AENEAS Studio는 <b>브랜드 코어</b>, <b>웹 경험</b> 그리고 <b>비주얼 시스템</b>이 필요한 '
        '브랜드를 위한 작은 스튜디오. <br/>첫 번째 데크부터 라이브 사이트까지, '
        '사막을 건너 다음 그린 플레이스에 도착할 때까지 함께 걷습니다.'
        '</div>'
        '<span class="chip">Brand &amp; Web Direction</span>'
        '<span class="chip">UX Writing &amp; Deck Systems</span>'
        '<span class="chip">Framer / Webflow / Next.js</span>',
        unsafe_allow_html=True,
    )


def render_home():
    jump_id = consume_pending_jump()
    if jump_id: js_scroll_to_anchor(jump_id)

    showcase = get_showcase()
    view = build_view(showcase.state)

    col_left, col_right = st.columns([1.1, 1.0], vertical_alignment="center")
    with col_left:
        render_hero()
    with col_right:
        render_constellation(showcase, view)

    st.markdown("---")
    render_visual_panel(showcase, view)

    st.markdown("---")
    anchor("work")
    render_boards(showcase, view)
    render_detail(showcase, view)
    render_zoom(showcase, view.zoomed)

    if config.SHOW_LAB:
        st.markdown("---")
        anchor("lab")
        render_lab()
    if config.SHOW_STATUS:
        st.markdown("---")
        anchor("status")
        render_status()
    render_footer()


# -----------------------------
# Dispatch
# -----------------------------
render_home()
