"""
Korean conversation scripts (해요체).
"""

from __future__ import annotations

from typing import List

from ..core.types import (
    ConversationTurn,
    PHASE_ARTICULATION,
    PHASE_CLOSING,
    PHASE_FIT_FEAR,
    PHASE_PATTERNS,
    PHASE_PRESSURE,
    PHASE_RECAP,
    PHASE_YOURS_VS_THEIRS,
    START_SENTINEL,
    UserContext,
    constant,
)

SKILL_ICONS = ["📊", "🎨", "🖼️", "🔬", "📚", "💡"]
SKILL_SUMMARIES = [
    "논리적으로 이해하고 검증하기",
    "창의적 해결책 찾고 공감하기",
    "시각적으로 아름답게 표현하기",
]


def courses_text(ctx: UserContext) -> str:
    if len(ctx.courses) >= 2:
        text = f"{ctx.courses[0]}와 {ctx.courses[1]}"
        if len(ctx.courses) > 2:
            text += f", 그리고 {ctx.courses[2]}"
        return text
    return ", ".join(ctx.courses)


# =============================================================================
# 1학년, 과목 선택 후 (happy path)
# =============================================================================

def _post_opening(ctx: UserContext) -> str:
    return (
        f"안녕하세요 {ctx.name}님! 👋\n\n"
        f"선택한 과목들을 보니까, {courses_text(ctx)}를 골랐네요.\n\n"
        "이 과목들을 통해 어떤 역량을 키워갈지 함께 이야기해볼까요?\n\n"
        f"먼저 {ctx.course(0)} 수업을 상상해볼게요. 그 수업에서 어떤 걸 배우게 될 것 같아요?"
    )


def _post_why_matters(ctx: UserContext) -> str:
    if ctx.interests:
        return (
            "실제 세상의 문제를 해결하고 싶다는 마음이 느껴져요. ✨\n\n"
            f"Role Roulette에서 {ctx.interests[0]}에 관심을 보이셨던 게 생각나네요.\n"
            "그 연결고리가 있는 것 같아요?"
        )
    return (
        "실제 세상의 문제를 해결하고 싶다는 마음이 느껴져요. ✨\n\n"
        "구체적으로 어떤 문제를 해결하고 싶은지 생각해본 적 있어요?"
    )


def _post_balance(ctx: UserContext) -> str:
    if ctx.keywords:
        quoted = "과 ".join(f'"{k}"' for k in ctx.keywords[:2])
        return (
            '"균형"이라는 표현이 정말 좋네요. 🎯\n\n'
            f"Step 0에서 {ctx.name}님이 선택한 키워드가 생각나요:\n{quoted}\n\n"
            f"그게 {ctx.course(0)} + {ctx.course(1)} 조합으로 나타난 것 같아요."
        )
    return (
        '"균형"이라는 표현이 정말 좋네요. 🎯\n\n'
        "창의성과 논리성, 이 둘의 균형을 찾으려는 게 느껴져요."
    )


def _post_third_course(ctx: UserContext) -> str:
    if len(ctx.courses) >= 3:
        return (
            f"그렇죠! 이제 {ctx.courses[2]}도 살펴볼까요?\n\n"
            "이 과목은 어떤 역량을 키워줄 것 같아요?"
        )
    return (
        f"이 두 과목을 합치면 {ctx.name}님만의 독특한 조합이 나와요.\n\n"
        "많은 학생들이 둘 중 하나만 선택하는데, "
        f"{ctx.name}님은 이 둘이 서로를 강화한다는 걸 본 거예요. ⭐"
    )


def _post_summary(ctx: UserContext) -> str:
    lines = []
    for idx, course in enumerate(ctx.courses):
        icon = SKILL_ICONS[idx] if idx < len(SKILL_ICONS) else "✨"
        skill = SKILL_SUMMARIES[idx] if idx < len(SKILL_SUMMARIES) else "새로운 역량 키우기"
        lines.append(f"{icon} {course}: {skill}")
    return (
        f"정리해볼게요. {ctx.name}님이 이 과목들을 통해 키우게 될 역량들:\n\n"
        + "\n".join(lines)
        + "\n\n이게 다 맞는 것 같아요?"
    )


def _post_closing(ctx: UserContext) -> str:
    return (
        "그게 제일 중요해요! 💚\n\n"
        "흥미를 따라가면, 필요한 역량은 자연스럽게 따라와요.\n"
        f"그리고 {ctx.name}님이 좋아하는 걸 하면서 배우는 건 "
        "억지로 필요해서 배우는 것보다 훨씬 깊이 배우게 돼요.\n\n"
        "오늘 이야기 나눠줘서 고마워요.\n\n"
        "정리하면:\n"
        f"- {ctx.name}님은 독특한 조합을 선택했어요\n"
        "- 이 선택은 흥미에서 나온 거예요 (두려움이 아니라!)\n"
        "- 언제든지 다시 와서 고민을 나눠도 돼요\n\n"
        "Mirae는 항상 여기 있어요. 💙\n\n"
        "다음 단계로 넘어갈 준비가 됐나요?"
    )


YEAR1_POST_SELECTION_KO: List[ConversationTurn] = [
    # Turn 1: 오프닝 & 요약
    ConversationTurn(
        turn_number=1,
        phase=PHASE_RECAP,
        trigger=[START_SENTINEL, "INITIAL"],
        message=_post_opening,
        expected_user_patterns=["문제", "창의", "협업", "디자인", "해결", "생각", "능력"],
        vague=lambda ctx: (
            f"괜찮아요! {ctx.course(0)}는 보통 문제를 새로운 방식으로 바라보고, "
            "창의적으로 접근하는 걸 배워요.\n\n"
            f"{ctx.name}님이 이 수업을 선택한 이유가 궁금해요. 무엇 때문에 끌렸나요?"
        ),
        question=lambda ctx: (
            f"좋은 질문이에요! {ctx.course(0)}에서 배우는 내용은 다양하지만, "
            f"가장 중요한 건 {ctx.name}님이 이 수업을 통해 무엇을 키우고 싶은가예요.\n\n"
            "어떤 역량이 궁금하세요?"
        ),
    ),

    # Turn 2: 첫 과목 역량
    ConversationTurn(
        turn_number=2,
        phase=PHASE_ARTICULATION,
        trigger=["문제", "창의", "해결", "협업", "디자인"],
        message=lambda ctx: (
            "창의적 문제 해결! 정말 중요한 역량이에요. 💡\n\n"
            f"왜 그게 {ctx.name}님한테 중요한 것 같아요?"
        ),
        expected_user_patterns=["중요", "하고 싶", "관심", "필요", "해결", "세상", "사람"],
        vague=constant(
            "그 마음 이해해요. 때로는 왜 중요한지 말로 표현하기 어려울 때가 있죠.\n\n"
            "다르게 물어볼게요: 이 역량을 키우면 어떤 걸 하고 싶어요?"
        ),
    ),

    # Turn 3: 왜 중요한지
    ConversationTurn(
        turn_number=3,
        phase=PHASE_ARTICULATION,
        trigger=["하고 싶", "해결", "도움", "사람", "세상"],
        message=_post_why_matters,
        expected_user_patterns=["네", "맞", "그렇", "사회", "환경", "사람"],
        vague=constant(
            "괜찮아요, 구체적이지 않아도 돼요. 탐색하는 과정이니까요.\n\n"
            '지금은 "문제 해결"이라는 방향성만으로도 충분해요.'
        ),
    ),

    # Turn 4: 다음 과목으로
    ConversationTurn(
        turn_number=4,
        phase=PHASE_ARTICULATION,
        trigger=["네", "맞", "그렇", "연결", "관련"],
        message=lambda ctx: (
            f"좋아요! {ctx.course(0)}로 사회 문제에 접근하는 거네요. 👏\n\n"
            f"그럼 {ctx.course(1, '다음 과목')}은 어떤 역할을 할 것 같아요?\n"
            "이 과목에서는 어떤 역량을 키우게 될까요?"
        ),
        expected_user_patterns=["분석", "데이터", "증명", "논리", "숫자", "확인"],
    ),

    # Turn 5: 두 번째 과목 역량
    ConversationTurn(
        turn_number=5,
        phase=PHASE_ARTICULATION,
        trigger=["분석", "데이터", "증명", "논리"],
        message=lambda ctx: (
            "아, 흥미롭네요!\n\n"
            f"{ctx.course(0)}로 창의적인 해결책을 찾고,\n"
            f"{ctx.course(1, '두 번째 과목')}로 그게 정말 효과가 있는지 검증하는 거네요.\n\n"
            "이 두 가지가 함께 있으면 어떤 느낌이 들어요?"
        ),
        expected_user_patterns=["균형", "조화", "보완", "좋", "맞", "완성"],
    ),

    # Turn 6: 균형
    ConversationTurn(
        turn_number=6,
        phase=PHASE_PATTERNS,
        trigger=["균형", "조화", "보완", "좋"],
        message=_post_balance,
        expected_user_patterns=["오", "그렇", "맞", "신기", "연결"],
    ),

    # Turn 7: 세 번째 과목
    ConversationTurn(
        turn_number=7,
        phase=PHASE_ARTICULATION,
        trigger=["네", "오", "맞"],
        message=_post_third_course,
        expected_user_patterns=["표현", "시각", "심미", "아름", "예술", "디자인"],
    ),

    # Turn 8: 패턴
    ConversationTurn(
        turn_number=8,
        phase=PHASE_PATTERNS,
        trigger=["표현", "시각", "아름"],
        message=lambda ctx: (
            "시각적 표현과 심미성!\n\n"
            "이 세 과목을 다 합치면 어떤 그림이 그려져요?\n\n"
            f"문제를 이해하고({ctx.course(1)}),\n"
            f"창의적으로 해결하고({ctx.course(0)}),\n"
            f"아름답게 만드는({ctx.course(2, '세 번째 과목')}) 거 아닐까요?"
        ),
        expected_user_patterns=["네", "맞", "그렇", "정확"],
    ),

    # Turn 9: 나만의 조합
    ConversationTurn(
        turn_number=9,
        phase=PHASE_PATTERNS,
        trigger=["네", "맞", "그렇"],
        message=lambda ctx: (
            f"정확해요! 이게 {ctx.name}님만의 독특한 조합이에요. ⭐\n\n"
            f"많은 학생들이 {ctx.course(1)}와 {ctx.course(0)}를 함께 선택하지 않거든요.\n"
            f"하지만 {ctx.name}님은 이 둘이 서로를 강화한다는 걸 본 거예요.\n\n"
            f"그리고 {ctx.course(2, '다른 과목')}까지 더해지면, "
            '단순히 "작동하는" 해결책이 아니라 "아름답게 작동하는" 해결책을 만들 수 있겠네요.'
        ),
        expected_user_patterns=["특별", "좋", "신기", "그렇"],
    ),

    # Turn 10: 역량 정리
    ConversationTurn(
        turn_number=10,
        phase=PHASE_PATTERNS,
        trigger=["네", "그렇", "특별"],
        message=_post_summary,
        expected_user_patterns=["네", "맞", "그렇"],
    ),

    # Turn 11: Fit vs Fear
    ConversationTurn(
        turn_number=11,
        phase=PHASE_FIT_FEAR,
        trigger=["네", "맞"],
        message=lambda ctx: (
            "좋아요! 이제 솔직하게 물어볼게요. 🤔\n\n"
            f"이 역량들을 키우는 게 {ctx.name}님한테:\n"
            "- 흥미롭고 배우고 싶어서인가요?\n"
            "- 아니면 필요할 것 같아서, 갖춰야 할 것 같아서인가요?\n\n"
            "둘 다일 수도 있어요. 솔직하게 말해주세요!"
        ),
        expected_user_patterns=["흥미", "재미", "좋아", "필요", "걱정", "불안"],
    ),

    # Turn 12: Fit vs Fear 응답 + 마무리
    ConversationTurn(
        turn_number=12,
        phase=PHASE_CLOSING,
        trigger=["흥미", "재미", "좋아", "필요", "걱정"],
        message=_post_closing,
        expected_user_patterns=["네", "준비", "고마", "다음"],
        motivation_response=True,
    ),
]


# =============================================================================
# 일반 고민 (기본)
# =============================================================================

def _general_pattern(ctx: UserContext) -> str:
    noticed = (ctx.energizers or ctx.keywords or ctx.interests)[:2]
    if noticed:
        quoted = "과 ".join(f'"{n}"' for n in noticed)
        return (
            f"아까 {quoted} 이야기를 해줬었죠. 🎯\n\n"
            f"{ctx.course(1, ctx.course(0))}에서도 그런 모습이 보여요?"
        )
    return (
        f"{ctx.name}님이 어떤 것에 끌리는지 조금씩 보이기 시작해요. 🎯\n\n"
        f"{ctx.course(1, ctx.course(0))}에서도 같은 게 느껴져요?"
    )


GENERAL_REFLECTION_KO: List[ConversationTurn] = [
    ConversationTurn(
        turn_number=1,
        phase=PHASE_RECAP,
        trigger=[START_SENTINEL, "INITIAL"],
        message=lambda ctx: (
            f"안녕하세요 {ctx.name}님! 👋\n\n"
            f"{courses_text(ctx)}를 고민하고 있네요.\n\n"
            "오늘 어떤 고민으로 찾아왔어요?"
        ),
        expected_user_patterns=["과목", "수업", "선택", "고르", "결정", "진로", "미래", "헷갈", "고민"],
        vague=constant(
            "괜찮아요. 꼭 분명한 질문이 있어야 하는 건 아니에요.\n\n"
            "요즘 가장 자주 생각나는 과목은 어떤 거예요?"
        ),
        question=lambda ctx: (
            f"좋은 질문이에요! 여기는 {ctx.name}님이 편하게 생각을 정리하는 공간이에요.\n\n"
            "지금 가장 헷갈리는 부분이 뭐예요?"
        ),
    ),
    ConversationTurn(
        turn_number=2,
        phase=PHASE_ARTICULATION,
        trigger=["과목", "수업", "선택"],
        message=lambda ctx: (
            "이야기해줘서 고마워요. 💡\n\n"
            f"{ctx.course(0)}부터 이야기해볼까요? 그 과목에서 가장 궁금한 부분은 뭐예요?"
        ),
        expected_user_patterns=["배우", "역량", "프로젝트", "아이디어", "사람", "문제", "만들", "이해"],
        vague=lambda ctx: (
            "괜찮아요, 궁금한 마음이 늘 말로 나오는 건 아니니까요.\n\n"
            f"{ctx.course(0)} 수업에서 정말 좋은 하루를 상상해보면, 뭘 하고 있을 것 같아요?"
        ),
    ),
    ConversationTurn(
        turn_number=3,
        phase=PHASE_PATTERNS,
        trigger=["배우", "역량", "프로젝트"],
        message=_general_pattern,
        expected_user_patterns=["네", "맞", "그렇", "연결", "비슷", "둘 다", "같"],
    ),
    ConversationTurn(
        turn_number=4,
        phase=PHASE_FIT_FEAR,
        trigger=["네", "맞", "비슷"],
        message=lambda ctx: (
            "이제 솔직하게 물어볼게요. 🤔\n\n"
            f"{ctx.name}님한테 이 과목들은 흥미롭고 배우고 싶은 건가요?\n"
            "아니면 필요할 것 같아서, 해야 할 것 같아서인가요?\n\n"
            "둘 다일 수도 있어요!"
        ),
        expected_user_patterns=["흥미", "재미", "좋아", "필요", "걱정", "불안", "궁금", "해야"],
    ),
    ConversationTurn(
        turn_number=5,
        phase=PHASE_CLOSING,
        trigger=["흥미", "필요"],
        message=constant(
            "그게 제일 중요해요! 💚\n\n"
            "흥미를 따라가면, 필요한 역량은 자연스럽게 따라와요.\n\n"
            "이 길에 대해 얼마나 확신이 드세요? (마음속으로 1-10점 정도로 생각해보세요)"
        ),
        expected_user_patterns=["네", "준비", "고마", "다음", "점", "응"],
        motivation_response=True,
    ),
    ConversationTurn(
        turn_number=6,
        phase=PHASE_CLOSING,
        trigger=["네", "고마"],
        message=lambda ctx: (
            f"함께 생각해줘서 고마워요, {ctx.name}님.\n\n"
            "어떤 결정을 하든, 언제든지 다시 와서 이야기 나눠도 돼요.\n\n"
            "Mirae는 항상 여기 있어요. 💙"
        ),
    ),
]


# =============================================================================
# 3학년 / 외부 압박
# =============================================================================

YEAR3_PRESSURE_KO: List[ConversationTurn] = [
    ConversationTurn(
        turn_number=1,
        phase=PHASE_PRESSURE,
        trigger=[START_SENTINEL, "INITIAL"],
        message=lambda ctx: (
            f"안녕하세요 {ctx.name}님. 🤍\n\n"
            f"{courses_text(ctx)}에 수능까지 다가오니, 마음이 많이 복잡할 것 같아요.\n\n"
            "지금 어떤 압박을 가장 크게 느끼고 있어요?"
        ),
        expected_user_patterns=["부모", "엄마", "아빠", "선생님", "수능", "성적", "점수", "대학", "기대", "스트레스", "압박", "가족"],
        vague=constant(
            "괜찮아요. 압박은 여러 곳에서 오니까 이름 붙이기 어려울 수 있어요.\n\n"
            "내년을 떠올리면 가장 먼저 어떤 감정이 들어요?"
        ),
    ),
    ConversationTurn(
        turn_number=2,
        phase=PHASE_YOURS_VS_THEIRS,
        trigger=["부모", "선생님", "수능"],
        message=constant(
            "정말 무겁게 느껴지겠어요. 그렇게 느끼는 게 당연해요. 🤍\n\n"
            "부모님이나 선생님은 뭘 원하시는 것 같아요?"
        ),
        expected_user_patterns=["원하", "기대", "의사", "법", "전공", "안정", "직업", "대학", "좋은"],
    ),
    ConversationTurn(
        turn_number=3,
        phase=PHASE_YOURS_VS_THEIRS,
        trigger=["원하", "기대"],
        message=constant(
            "그분들의 바람을 말해줘서 고마워요.\n\n"
            "잠깐만 상상해볼까요? 만약 모든 압박이 없다면, 뭘 하고 싶어요?"
        ),
        expected_user_patterns=["하고 싶", "좋아", "꿈", "관심", "디자인", "예술", "과학", "만들"],
        vague=constant(
            "아직 몰라도 괜찮아요. 지금은 대부분 그래요.\n\n"
            "시간 가는 줄 모르고 하게 되는 게 있어요?"
        ),
    ),
    ConversationTurn(
        turn_number=4,
        phase=PHASE_PATTERNS,
        trigger=["하고 싶", "꿈"],
        message=lambda ctx: (
            f"그게 {ctx.name}님 자신의 목소리예요. 정말 소중해요. ✨\n\n"
            f"{ctx.name}님의 마음과 부모님의 기대, 어떤 부분은 겹치고 어떤 부분은 다른가요?"
        ),
        expected_user_patterns=["겹", "둘 다", "같", "다르", "비슷", "동의", "그런데", "하지만"],
    ),
    ConversationTurn(
        turn_number=5,
        phase=PHASE_FIT_FEAR,
        trigger=["겹", "다르"],
        message=lambda ctx: (
            f"{ctx.course(0)} 이야기로 돌아가 볼게요. 🤔\n\n"
            "그 과목은 흥미로워서 듣는 건가요, "
            "아니면 뒤처질까 봐 필요해서 듣는 건가요?\n\n"
            "둘 다일 수도 있어요. 솔직하게 말해주세요!"
        ),
        expected_user_patterns=["흥미", "재미", "좋아", "필요", "걱정", "불안", "해야", "기대"],
    ),
    ConversationTurn(
        turn_number=6,
        phase=PHASE_CLOSING,
        trigger=["흥미", "필요"],
        message=constant(
            "그게 제일 중요해요! 💚\n\n"
            "이 길에 대해 얼마나 확신이 드세요? (마음속으로 1-10점 정도로 생각해보세요)"
        ),
        expected_user_patterns=["네", "준비", "고마", "점", "응"],
        motivation_response=True,
    ),
    ConversationTurn(
        turn_number=7,
        phase=PHASE_CLOSING,
        trigger=["네", "고마"],
        message=lambda ctx: (
            f"오늘 솔직하게 이야기해줘서 고마워요, {ctx.name}님.\n\n"
            "자신을 이해하고 행복하게 사는 것도 효도의 일부예요. "
            "오늘 당장 하나를 고르지 않아도 괜찮아요.\n\n"
            "Mirae는 항상 여기 있어요. 💙"
        ),
    ),
]
