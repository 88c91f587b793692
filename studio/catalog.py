# studio/catalog.py — static content (modes, projects, visuals, boards, lab)
# ----------------------------------------------------------------
# Read-only tables keyed by closed identifier sets. Lookups are total:
# an identifier outside the set is a programming error and raises.
# ----------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from studio.board import Placement, spell


class ModeId(str, Enum):
    """Studio modes."""
    BRAND = "brand"
    WEB = "web"
    VISUAL = "visual"


class ProjectId(str, Enum):
    """Case-study projects."""
    ZIGZAG = "zigzag"
    GMARKET = "gmarket"
    TRAVEL = "travel"


@dataclass(frozen=True)
class ModeConfig:
    id: ModeId
    tab_label: str
    chip_label: str
    section_label: str
    heading: str
    body: str
    card_blurb: str
    focus: str
    status_label: str
    route_label: str
    title_in_target: str
    # opaque colour tokens, only the presentation layer reads them
    core_color: str
    accent_color: str
    tab_bg: str


@dataclass(frozen=True)
class ProcessStep:
    label: str
    body: str


@dataclass(frozen=True)
class Link:
    label: str
    href: str


@dataclass(frozen=True)
class ProjectDetail:
    id: ProjectId
    kicker: str
    title: str
    role: str
    context: str
    goals: Tuple[str, ...]
    process: Tuple[ProcessStep, ...]
    outcome: str
    period: Optional[str] = None
    client_type: Optional[str] = None
    tools: Optional[str] = None
    highlights: Tuple[str, ...] = ()
    links: Tuple[Link, ...] = ()


@dataclass(frozen=True)
class VisualAsset:
    src: str
    title: str
    caption: str


@dataclass(frozen=True)
class BoardSpec:
    project: ProjectId
    placements: Tuple[Placement, ...]
    variant: str          # "wide" | "narrow"
    accent: str           # "emerald" | "sky" | "amber"
    card_lines: Tuple[str, str]


@dataclass(frozen=True)
class LabItem:
    id: str
    kind: str             # "freelance" | "proposal" | "report"
    badge: str
    title: str
    role: str
    summary: str
    period: Optional[str] = None
    href: Optional[str] = None
    cta: Optional[str] = None

    @property
    def footer_label(self) -> str:
        return {"freelance": "Client work", "proposal": "Deck / Proposal"}.get(self.kind, "Report")


# -----------------------------
# Modes
# -----------------------------
MODES: Mapping[ModeId, ModeConfig] = MappingProxyType({
    ModeId.BRAND: ModeConfig(
        id=ModeId.BRAND,
        tab_label="BRAND CORE",
        chip_label="Brand Core – Naming & Storyframe",
        section_label="01 · BRAND CORE",
        heading="Naming & Storyframe Lab",
        body=("브랜드의 첫 문장, 첫 슬로건, 첫 데크를 설계하는 모드입니다. "
              "이름·톤·구조를 정리한 뒤 나머지 디자인을 쌓아 올립니다."),
        card_blurb="브랜드의 첫 문장과 구조를 잡는 모드입니다.",
        focus="Story / Naming",
        status_label="ACTIVE",
        route_label="Desert → Name & Storyframe",
        title_in_target="BRAND CORE",
        core_color="rgba(22,140,126,0.9)",
        accent_color="#7FEAD4",
        tab_bg="#4C9990",
    ),
    ModeId.WEB: ModeConfig(
        id=ModeId.WEB,
        tab_label="WEB EXPERIENCE",
        chip_label="Web Experience – Site & Funnel Design",
        section_label="02 · WEB EXPERIENCE",
        heading="Site & Funnel Design",
        body=("Figma에서 설계한 여정을 Framer·Webflow·Next.js로 옮기고, "
              "작은 팀이 운영하기 쉬운 구조와 퍼널을 설계하는 모드입니다."),
        card_blurb="Figma에서 설계한 여정을 라이브 사이트까지 이어붙입니다.",
        focus="UX / Flows",
        status_label="READY",
        route_label="Desert → Web Experience",
        title_in_target="WEB EXPERIENCE",
        core_color="rgba(56,189,248,0.6)",
        accent_color="#7EC8FF",
        tab_bg="#3B82C2",
    ),
    ModeId.VISUAL: ModeConfig(
        id=ModeId.VISUAL,
        tab_label="VISUAL SYSTEMS",
        chip_label="Visual Systems – Decks & Visual Stories",
        section_label="03 · VISUAL SYSTEMS",
        heading="Decks & Visual Systems",
        body=("리포트, 피치덱, 인스타 시리즈까지 반복해서 쓸 수 있는 시각 언어를 세팅합니다. "
              "카드·슬라이드·피드 단위로 디자인 시스템을 구성합니다."),
        card_blurb="슬라이드·피드·카드까지 반복해서 쓰는 시각 언어를 설계합니다.",
        focus="Deck / Feed",
        status_label="QUEUED",
        route_label="Desert → Visual Systems",
        title_in_target="VISUAL SYSTEMS",
        core_color="rgba(252,211,77,0.7)",
        accent_color="#F9E08A",
        tab_bg="#D0B15A",
    ),
})

MODE_BULLETS: Mapping[ModeId, Tuple[str, ...]] = MappingProxyType({
    ModeId.BRAND: (
        "네이밍·슬로건·톤앤매너를 한 세트로 정리합니다.",
        "대표 슬라이드 · 소개 페이지에 들어갈 첫 문장을 설계합니다.",
        "디자인 이전에 ‘왜 이 브랜드인가’를 먼저 합의합니다.",
    ),
    ModeId.WEB: (
        "와이어프레임 → UX 카피 → UI 컴포넌트 순서로 정리합니다.",
        "Framer · Webflow · Next.js 등 실제 구현까지를 고려합니다.",
        "운영 팀이 업데이트하기 쉬운 구조와 퍼널을 함께 설계합니다.",
    ),
    ModeId.VISUAL: (
        "리포트·피치덱·인스타 피드에 반복 노출될 레이아웃을 만듭니다.",
        "타이포·컬러·컴포넌트 사용 규칙을 가이드로 정리합니다.",
        "디자이너가 없을 때도 팀이 자체 제작할 수 있는 수준을 목표로 합니다.",
    ),
})

# -----------------------------
# Projects
# -----------------------------
PROJECT_DETAILS: Mapping[ProjectId, ProjectDetail] = MappingProxyType({
    ProjectId.ZIGZAG: ProjectDetail(
        id=ProjectId.ZIGZAG,
        kicker="FASHION COMMERCE · UX / BRANDING",
        title="지그재그 패션 쇼핑몰 런칭",
        period="2023.03 – 2023.11 (약 10개월)",
        client_type="Z세대 타깃 패션 쇼핑몰",
        tools="Photoshop, Illustrator, Figma, HTML/CSS",
        role="시장 조사 · 스튜디오/모델 섭외 · 촬영 콘셉트 기획 · 상세페이지 구조 설계 및 퍼블리싱",
        context=(
            "클라이언트는 10대 후반~20대 초반 여성 타깃을 노리고 있었지만, "
            "기존 상세페이지는 20대 중후반 기준으로 구성되어 있어 톤과 구조 모두 타깃과 어긋나 있었습니다. "
            "내부에 브랜딩·기획 리소스가 없어, 시장 조사부터 촬영 시스템·상세 구조까지 처음부터 판을 만들어야 하는 상황이었습니다."
        ),
        highlights=(
            "톤과 구조 모두 타깃과 어긋나 있었습니다.",
            "시장 조사부터 촬영 시스템·상세 구조까지 처음부터 판을 만들어야 하는 상황이었습니다.",
        ),
        goals=(
            "10대 후반~20대 초반 Z세대에 맞는 브랜드 톤과 촬영 콘셉트를 새로 정의할 것",
            "지그재그 환경에 맞는 상세페이지 구조를 템플릿화해, 촬영·디자인을 반복 제작 가능하게 할 것",
            "상품별 상세 템플릿을 구조화해 전환율과 재구매를 끌어올리고, 동일 인력으로 시즌 제작 물량을 커버할 것",
            "지그재그 랭킹·경쟁사 리서치 기반으로 ‘어디서 차별화할지’ 포지션을 명확히 할 것",
        ),
        process=(
            ProcessStep("01 · MARKET SCAN & POSITIONING",
                        "지그재그 상위 랭킹·리뷰·10대 커뮤니티를 분석해 타깃 인사이트를 정리하고, ‘10대 후반 전용 포지션’ 영역을 정의했습니다."),
            ProcessStep("02 · SHOOTING SYSTEM",
                        "스튜디오와 모델을 직접 섭외하고, 룩 구성·포즈/구도·컷 수를 표준화한 촬영 가이드·체크리스트 패키지를 제작했습니다."),
            ProcessStep("03 · TEMPLATE & ROLL-OUT",
                        "‘핵심 정보 카드 → 전체 실루엣 → 디테일’ 순의 모듈형 상세 템플릿을 HTML/CSS로 구현하고, 운영팀이 복제해 쓸 수 있도록 인수인계했습니다."),
        ),
        outcome=(
            "런칭 후 3개월 동안 매출이 약 900% 상승했고,\n"
            "지그재그 앱 내 쇼핑 카테고리 상위 TOP3까지 도달했습니다.\n"
            "별도 광고 증액 없이도 상세 템플릿과 촬영 시스템만으로 전환율을 끌어올렸고,\n"
            "이후 시즌 상품들은 같은 구조를 사용해 제작 리소스를 크게 줄였습니다."
        ),
    ),
    ProjectId.GMARKET: ProjectDetail(
        id=ProjectId.GMARKET,
        kicker="GLOBAL MARKETPLACE · UX / SEO",
        title="지마켓 글로벌(일본) · 라쿠텐 환경 대응 운영",
        period="약 1년 이상 운영",
        client_type="글로벌 오픈마켓",
        tools="Photoshop, HTML/CSS, Rakuten 관리툴",
        role="사이트 UI 디자인 · 프로모션 배너 · 퍼블리싱 · SEO 구조 설계 및 운영",
        context=(
            "일본 고객을 대상으로 하는 지마켓 글로벌/라쿠텐 스토어는 "
            "한국에서 쓰던 상세 구조를 거의 그대로 가져온 상태라, "
            "일본 사용자 입장에서는 정보 순서와 표현 방식이 낯설었습니다. "
            "게다가 라쿠텐 입점·운영은 기존에 다른 사업체가 진행하다가 중간에 포기된 상태였고, "
            "저는 그 이후에 합류해 구조를 처음부터 다시 잡는 리빌드 역할을 맡았습니다. "
            "상품 구조·노출 전략도 카테고리마다 제각각이라 브랜드 인지와 구매 흐름이 끊기는 상황이었습니다. "
            "국내와는 다른 일본 시장 특성과 라쿠텐 주 고객층의 UX 습관, 라쿠텐 검색/SEO 룰을 먼저 이해한 뒤, "
            "일본 사용자가 편하게 느끼는 정보 구조와 내부 운영 여건이 동시에 맞는 레이아웃을 설계해야 했습니다."
        ),
        highlights=(
            "기존에 다른 사업체가 진행하다가 중간에 포기된 상태",
            "국내와는 다른 일본 시장 특성과 라쿠텐 주 고객층의 UX 습관, 라쿠텐 검색/SEO 룰",
            "일본 사용자가 편하게 느끼는 정보 구조와 내부 운영 여건이 동시에 맞는 레이아웃",
        ),
        goals=(
            "라쿠텐 상위 스토어를 분석해 일본 고객이 익숙한 정보 구조와 노출 룰을 파악할 것",
            "리스트·상세·기획전 페이지를 일관된 UX로 재정리해 구매 흐름을 매끄럽게 만들 것",
            "카테고리별 키워드·SEO 룰을 정리해 운영하면서도 유지할 수 있는 체계를 만들 것",
        ),
        process=(
            ProcessStep("01 · ENVIRONMENT STUDY",
                        "라쿠텐 상위 스토어의 카테고리 구조·키워드·쿠폰/혜택 노출 방식을 분석해, 우리 상품군과 매칭한 레퍼런스 맵을 만들었습니다."),
            ProcessStep("02 · UX & LAYOUT",
                        "리스트·상세·기획전을 일본 사용자가 익숙한 순서(가격·쿠폰·리뷰·혜택) 기준으로 재배치하고, 공통 레이아웃 가이드를 정의했습니다."),
            ProcessStep("03 · SEO & OPERATION",
                        "카테고리별 필수 키워드 세트를 만들고 타이틀·설명·배너 카피에 반영했습니다. 운영 중에도 검색 리포트를 보며 노출/클릭을 주기적으로 튜닝했습니다."),
        ),
        outcome=(
            "라쿠텐 환경에 맞는 레이아웃과 카테고리별 키워드 세트를 정리한 뒤,\n"
            "검색 노출과 기획전 유입이 점차 안정되었습니다.\n"
            "운영팀은 제가 만든 공통 템플릿(리스트·상세·기획전)에 맞춰 배너와 페이지를 반복 제작할 수 있게 되었고,\n"
            "내부에서는 ‘일본/라쿠텐 UX와 SEO 구조까지 설계할 수 있는 디자이너’로 포지셔닝되었습니다."
        ),
    ),
    ProjectId.TRAVEL: ProjectDetail(
        id=ProjectId.TRAVEL,
        kicker="TRAVEL / LIFESTYLE · BRAND & WEB",
        title="여행·라이프스타일 브랜드 리빌딩",
        period="약 6개월, ongoing",
        client_type="여행/숙박 커머스",
        tools="Cafe24, Figma, Notion, Photoshop, Toss",
        role="브랜드 코어 정의 · 웹 IA/와이어 설계 · 인스타/피드 시각 언어 설계 · 제휴 제안서/리포트 템플릿 제작",
        context=(
            "프로젝트는 라우트웨이컨설팅 주식회사가 운영하던 사이드 프로젝트 RouteWorld에서 시작되었습니다. "
            "초기에는 뷰티 커머스로 출발했지만, 이후 호텔·여행 상품, 다시 여행+라이프스타일 커머스로 "
            "사업 축이 크게 바뀌어 왔습니다. 캠페인마다 타깃과 상품이 달라지면서 톤과 페이지 구조도 함께 흔들렸고, "
            "프리미엄 호텔·리조트 브랜드를 지향하다가 IPSC 체험, 국내 숙소 등으로 피봇이 잦았습니다. "
            "이런 환경에서 저는 계속 바뀌는 상품·사업자 구조 위에도 유지되는 브랜드 코어와 운영 시스템을 설계하고, "
            "어떤 캠페인이 와도 팀과 외부 파트너가 따라갈 수 있는 기준선을 만드는 역할을 맡았습니다. "
            "이후 회사 사정으로 RouteWorld 사업은 정리되었지만, "
            "방향 전환과 종료 과정까지 포함해 브랜드를 어떻게 핸들링했는지가 이 프로젝트의 중요한 경험으로 남았습니다."
        ),
        highlights=(
            "라우트웨이컨설팅 주식회사",
            "RouteWorld",
            "여행+라이프스타일 커머스",
            "계속 바뀌는 상품·사업자 구조 위에도 유지되는 브랜드 코어와 운영 시스템",
            "방향 전환과 종료 과정까지 포함해 브랜드를 어떻게 핸들링했는지",
        ),
        goals=(
            "인플루언서 중심의 산발적인 운영에서, 브랜드·상품·숫자를 기준으로 한 운영 프레임으로 전환할 것",
            "팀원들이 따라올 수 있는 브리프 → 제작 → 리뷰 워크플로우를 만들고 역할과 책임을 명확히 할 것",
            "호텔·체험 제휴사와 에이전시에게도 일관된 언어와 포맷으로 브랜드를 설명할 수 있게 할 것",
            "사업자 형태 조정이 잦은 환경에서도 유지되는 브랜드 코어와 포지셔닝을 정리할 것",
        ),
        process=(
            ProcessStep("01 · BRAND CORE & ROUTE",
                        "대표·리더 인터뷰와 기존 캠페인/피드를 정리해 ‘무엇을 팔고 싶은지 vs 실제로 팔리고 있는 것’을 분리했습니다. "
                        "그 위에 ‘도시에 닿는 가장 빠른 여행’이라는 코어 문장과 호텔·체험·콘텐츠를 잇는 여정 맵을 만들었습니다."),
            ProcessStep("02 · SYSTEM & TEAM WORKFLOW",
                        "캠페인 흐름을 브리핑 → 제작 → 리뷰 3단계로 단순화하고, Notion 태스크보드와 Figma 템플릿으로 역할·산출물을 규격화했습니다. "
                        "팀원들이 같은 포맷으로 카드·배너·피드를 만들 수 있는 기준선을 세웠습니다."),
            ProcessStep("03 · EXTERNAL COLLAB & POSITIONING",
                        "호텔/체험 제휴사용 소개 데크와 제안서 템플릿을 제작해, 쇼핑몰 명의나 조건이 바뀌어도 브랜드 설명 구조는 유지되도록 설계했습니다. "
                        "외부 파트너와의 커뮤니케이션에서 브랜드 코어·타깃·딜 구조를 한 장표로 설명할 수 있게 정리했습니다."),
        ),
        outcome=(
            "뷰티 → 여행 → 여행+라이프스타일로 사업 축이 여러 번 바뀌는 동안에도,\n"
            "브랜드 코어 문장과 여정 맵, 제안서·피드 템플릿을 기준으로 캠페인과 제휴사가 바뀌어도 설명 구조를 유지할 수 있었습니다.\n"
            "리더·사업자 구성이 바뀌고 결국 RouteWorld 사업이 정리되는 과정까지,\n"
            "브랜드 기준선과 산출물 시스템을 문서와 템플릿으로 남겨 이후 AENEAS Studio 포트폴리오 설계의 기반이 되었습니다."
        ),
    ),
})

PROJECT_VISUALS: Mapping[ProjectId, Tuple[VisualAsset, ...]] = MappingProxyType({
    ProjectId.ZIGZAG: (
        VisualAsset("/work/zigzag/01-shooting-guide.jpg", "촬영 가이드 & 콘셉트 메모",
                    "런칭 타깃, 포즈, 소품, 조명까지 정의한 사전 기획 문서. 촬영팀과 공유한 기준점입니다."),
        VisualAsset("/work/zigzag/02-overview-kv.jpg", "런칭 키 비주얼",
                    "지그재그 패션 카테고리 런칭을 위해 제작한 시즌 키 비주얼."),
        VisualAsset("/work/zigzag/03-brand-mood.png", "브랜드 무드 & 톤",
                    "Femininity·Lovely·Confident 키워드를 시각 언어로 정리한 브랜드 무드보드."),
        VisualAsset("/work/zigzag/04-detail-hoodie.png", "후드 티 상세 페이지 구조",
                    "컬러, 핏, 스타일링 포인트를 한 흐름으로 배치한 후드 티셔츠 상세 모듈."),
        VisualAsset("/work/zigzag/05-detail-denim-skirt.png", "데님 스커트 스토리텔링 상세",
                    "추천 카피, 플라워 비주얼, 착장 컷을 결합해 설득력을 높인 상세 페이지."),
        VisualAsset("/work/zigzag/06-detail-training-pants.png", "트레이닝 팬츠 정보 모듈",
                    "핏·활동감 이미지와 Comment/Notice 모듈을 분리해 정보 탐색성을 높였습니다."),
    ),
    ProjectId.GMARKET: (
        VisualAsset("/work/gmarket/01-top-page.jpg", "라쿠텐 상위 카테고리 레이아웃",
                    "일본 고객이 익숙한 가격·쿠폰·혜택 순서를 기준으로 재배치한 리스트."),
        VisualAsset("/work/gmarket/02-campaign.jpg", "기획전 배너 & 캠페인",
                    "시즌 프로모션용 배너와 랜딩 조합."),
        VisualAsset("/work/gmarket/03-seo-structure.jpg", "SEO 구조 샘플",
                    "타이틀·설명·키워드 블록 구조 예시."),
    ),
    ProjectId.TRAVEL: (
        VisualAsset("/work/travel/01-brand-core.jpg", "브랜드 코어 정리",
                    "‘어떤 여행을 제안하는가’를 한 페이지로 정리한 코어 슬라이드."),
        VisualAsset("/work/travel/02-web-wireframe.png", "호텔·체험 IA & 와이어",
                    "여정 단계별로 나눈 IA와 와이어 시안."),
        VisualAsset("/work/travel/03-feed-system.jpg", "인스타 피드 카드 시스템",
                    "피드·슬라이드·배너에 공통 적용한 타이포/레이아웃 규칙."),
    ),
})

# -----------------------------
# Boards (one per project, in display order)
# -----------------------------
BOARDS: Tuple[BoardSpec, ...] = (
    BoardSpec(ProjectId.ZIGZAG, tuple(spell(1, 2, "ZIGZAG")), "wide", "emerald",
              ("FASHION COMMERCE", "UX / BRANDING")),
    BoardSpec(ProjectId.GMARKET, tuple(spell(1, 1, "GMARKET") + spell(2, 2, "RAKUTEN")), "narrow", "sky",
              ("GLOBAL MARKETPLACE", "UX / SEO")),
    BoardSpec(ProjectId.TRAVEL, tuple(spell(1, 2, "TRAVEL")), "wide", "amber",
              ("TRAVEL / LIFESTYLE", "BRAND & WEB")),
)

# -----------------------------
# Studio lab
# -----------------------------
LAB_ITEMS: Tuple[LabItem, ...] = (
    LabItem(
        id="global-vcc",
        kind="freelance",
        badge="FREELANCE · WEB",
        title="Global VCC · 화상 영어 플랫폼 리뉴얼",
        period="2024 (약 3개월)",
        role="IA 설계 · UX/UI 디자인 · HTML/CSS 퍼블리싱",
        summary=("복잡한 학원식 페이지를 ‘선별된 강사/커리큘럼/수강 신청 흐름’ 중심으로 재정리해, "
                 "과정·횟수·시간 선택과 견적 박스를 한 화면에서 이해할 수 있는 구조로 리빌딩했습니다."),
        href="https://tiffanyblue-iam.github.io/Project-VCC-website/",
        cta="사이트 보기",
    ),
    LabItem(
        id="lawdidim",
        kind="freelance",
        badge="FREELANCE · WEB",
        title="LawDidim · 회생·파산 법무사 랜딩",
        period="2024 (약 2개월)",
        role="UX 구조 설계 · 웹디자인 · 카피라이팅",
        summary=("회생·파산을 고민할 정도로 여유가 없는 사용자의 심리를 전제로, 최소한의 정보와 명확한 안내에 집중한 "
                 "랜딩 페이지 흐름을 설계했습니다. 성공사례·후기·FAQ를 한 흐름으로 배치해 안심·신뢰를 우선했습니다."),
        href="https://www.lawdidim.com/",
        cta="사이트 보기",
    ),
    LabItem(
        id="josun-routeworld",
        kind="proposal",
        badge="PROPOSAL · DECK",
        title="Josun Palace × Routeworld · 인플루언서 공동구매 제안서",
        period="2023 (약 3주)",
        role="제안 구조 설계 · 슬라이드 디자인",
        summary=("조선팰리스 비수기 객실을 메가급 인플루언서 공동구매로 판매하는 구조로, "
                 "ADR 유지·폐쇄형 랜딩·혜택 중심 패키지 흐름으로 설계한 제안서입니다."),
        href="/lab/routeworld_josun-palace.pdf",
        cta="PDF 제안서 열기",
    ),
)

TOOL_ICON_MAP: Dict[str, str] = {
    "Figma": "🎨",
    "Photoshop": "🖼",
    "Illustrator": "✏️",
    "HTML/CSS": "{;}",
    "Rakuten 관리툴": "🛒",
    "Notion": "📒",
    "Webflow/Next.js": "🌐",
}


# -----------------------------
# Lookups
# -----------------------------
def get_mode(mode_id) -> ModeConfig:
    return MODES[ModeId(mode_id)]


def get_mode_bullets(mode_id) -> Tuple[str, ...]:
    return MODE_BULLETS[ModeId(mode_id)]


def get_project(project_id) -> ProjectDetail:
    return PROJECT_DETAILS[ProjectId(project_id)]


def get_visuals(project_id) -> Tuple[VisualAsset, ...]:
    return PROJECT_VISUALS[ProjectId(project_id)]


def get_board(project_id) -> BoardSpec:
    pid = ProjectId(project_id)
    return next(b for b in BOARDS if b.project is pid)
