"""관리자 CLI 도구

사용법:
    python -m tools.admin stats                         서비스 현황 요약
    python -m tools.admin users                         사용자 목록
    python -m tools.admin users --vip                   VIP 사용자만
    python -m tools.admin user user@example.com         사용자 상세 (주문 포함)
    python -m tools.admin user user@example.com disable 계정 비활성화
    python -m tools.admin user user@example.com enable  계정 활성화
    python -m tools.admin orders                        최근 주문 (기본 7일)
    python -m tools.admin orders --days 30 --status PAID
    python -m tools.admin revenue                       매출 요약

VIP 만료일과 주문 상태는 결제 콜백으로만 바뀌므로 이 도구에서는 조회만 한다.
"""
import argparse
import asyncio
import os
import sys
from datetime import datetime, timedelta
from pathlib import Path

_BACKEND_ROOT = str(Path(__file__).resolve().parent.parent)
if _BACKEND_ROOT not in sys.path:
    sys.path.insert(0, _BACKEND_ROOT)

from sqlalchemy import select, func, desc

from infrastructure.persistence.database import get_db_session
from infrastructure.persistence.models import User, Order, UserRole, OrderStatus


# ==================== 유틸 ====================

def fmt_date(dt) -> str:
    if not dt:
        return "-"
    return dt.strftime("%Y-%m-%d %H:%M")


def fmt_vip(expire_at, now: datetime) -> str:
    if not expire_at:
        return "-"
    if expire_at > now:
        return f"VIP ~{expire_at:%Y-%m-%d}"
    return f"만료 {expire_at:%Y-%m-%d}"


def fmt_amount(amount) -> str:
    return f"{amount or 0:,}đ"


def print_table(headers: list, rows: list, col_widths: list = None):
    """간단한 테이블 출력"""
    if not col_widths:
        col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                      for i, h in enumerate(headers)]

    header_line = "".join(str(h).ljust(w) for h, w in zip(headers, col_widths))
    print(header_line)
    print("-" * len(header_line))
    for row in rows:
        print("".join(str(c).ljust(w) for c, w in zip(row, col_widths)))


async def _find_user(s, email: str) -> User:
    result = await s.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()
    if not user:
        print(f"사용자를 찾을 수 없습니다: {email}")
        sys.exit(1)
    return user


# ==================== 명령어 ====================

async def cmd_stats():
    """서비스 현황 요약"""
    now = datetime.utcnow()
    async with get_db_session() as s:
        total_users = (await s.execute(select(func.count(User.id)))).scalar()
        vip_users = (await s.execute(
            select(func.count(User.id)).where(User.vip_expire_at > now)
        )).scalar()
        status_counts = {}
        for st in OrderStatus:
            status_counts[st.value] = (await s.execute(
                select(func.count(Order.id)).where(Order.status == st)
            )).scalar()
        total_revenue = (await s.execute(
            select(func.sum(Order.amount)).where(Order.status == OrderStatus.PAID)
        )).scalar() or 0

    print("=== 서비스 현황 ===\n")
    print("[사용자]")
    print(f"  전체: {total_users}명 (VIP: {vip_users}명)")
    print("\n[주문]")
    for st, cnt in status_counts.items():
        print(f"  {st}: {cnt}건")
    print("\n[매출]")
    print(f"  전체: {fmt_amount(total_revenue)}")


async def cmd_users(vip_only: bool = False):
    """사용자 목록"""
    now = datetime.utcnow()
    async with get_db_session() as s:
        q = select(User).order_by(desc(User.created_at))
        if vip_only:
            q = q.where(User.vip_expire_at > now)
        users = (await s.execute(q)).scalars().all()

    if not users:
        print("사용자가 없습니다.")
        return

    headers = ["ID", "이메일", "이름", "VIP", "상태", "가입일"]
    rows = []
    for u in users:
        status_str = "활성" if u.is_active else "비활성"
        if u.role == UserRole.ADMIN:
            status_str += "(관리자)"
        rows.append([u.id, u.email, u.username or "-", fmt_vip(u.vip_expire_at, now),
                     status_str, fmt_date(u.created_at)])
    print(f"사용자 {len(rows)}명:\n")
    print_table(headers, rows)


async def cmd_user_detail(email: str):
    """사용자 상세"""
    now = datetime.utcnow()
    async with get_db_session() as s:
        user = await _find_user(s, email)
        orders = (await s.execute(
            select(Order).where(Order.user_id == user.id).order_by(desc(Order.created_at)).limit(10)
        )).scalars().all()
        total_paid = (await s.execute(
            select(func.sum(Order.amount)).where(Order.user_id == user.id, Order.status == OrderStatus.PAID)
        )).scalar() or 0

    print("=== 사용자 상세 ===\n")
    print(f"  ID:       {user.id}")
    print(f"  이메일:    {user.email}")
    print(f"  이름:      {user.username or '-'}")
    print(f"  전화:      {user.phone or '-'}")
    print(f"  역할:      {user.role.value}")
    print(f"  상태:      {'활성' if user.is_active else '비활성'}")
    print(f"  가입일:    {fmt_date(user.created_at)}")
    print(f"  최근로그인: {fmt_date(user.last_login_at)}")
    print(f"  VIP:       {fmt_vip(user.vip_expire_at, now)}")
    print(f"  총 결제:   {fmt_amount(total_paid)}")

    if orders:
        print("\n[최근 주문]")
        for o in orders:
            print(f"  {fmt_date(o.created_at)}  {o.order_code:>8}  {o.status.value:<10}  {fmt_amount(o.amount)}")


async def cmd_user_toggle(email: str, enable: bool):
    """계정 활성/비활성"""
    async with get_db_session() as s:
        user = await _find_user(s, email)
        user.is_active = enable

    action = "활성화" if enable else "비활성화"
    print(f"{email}: {action} 완료")


async def cmd_orders(days: int = 7, status: str = None):
    """최근 주문"""
    since = datetime.utcnow() - timedelta(days=days)
    async with get_db_session() as s:
        q = (select(Order, User.email)
             .join(User, Order.user_id == User.id)
             .where(Order.created_at >= since)
             .order_by(desc(Order.created_at))
             .limit(100))
        if status:
            q = q.where(Order.status == OrderStatus(status))
        rows_raw = (await s.execute(q)).all()

    if not rows_raw:
        print(f"최근 {days}일간 주문이 없습니다.")
        return

    headers = ["일시", "사용자", "주문코드", "금액", "상태", "설명"]
    rows = [[fmt_date(o.created_at), email[:20], o.order_code, fmt_amount(o.amount),
             o.status.value, o.description[:20]]
            for o, email in rows_raw]
    print(f"최근 {days}일 주문 ({len(rows)}건):\n")
    print_table(headers, rows)


def month_windows(now: datetime, count: int = 6) -> list:
    """이번 달부터 거꾸로 count개월의 [시작, 끝) 구간"""
    windows = []
    for i in range(count):
        y, m = divmod(now.year * 12 + now.month - 1 - i, 12)
        m_start = datetime(y, m + 1, 1)
        ny, nm = divmod(y * 12 + m + 1, 12)
        m_end = now if i == 0 else datetime(ny, nm + 1, 1)
        windows.append((m_start, m_end))
    return windows


async def cmd_revenue(now: datetime = None):
    """월별 매출 요약 (PAID 주문 기준, 결제 반영 시각)"""
    now = now or datetime.utcnow()
    print("=== 매출 요약 ===\n")
    headers = ["월", "건수", "매출"]
    rows = []
    async with get_db_session() as s:
        for m_start, m_end in month_windows(now):
            count, amount = (await s.execute(
                select(func.count(Order.id), func.sum(Order.amount)).where(
                    Order.status == OrderStatus.PAID,
                    Order.updated_at >= m_start,
                    Order.updated_at < m_end,
                )
            )).one()
            rows.append([m_start.strftime("%Y-%m"), count or 0, fmt_amount(amount)])
    print_table(headers, rows)


# ==================== 메인 ====================

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="음악 스트리밍 VIP 서비스 관리 CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
명령어:
  stats                              서비스 현황 요약
  users [--vip]                      사용자 목록
  user <email>                       사용자 상세
  user <email> disable|enable        계정 비활성화/활성화
  orders [--days N] [--status S]     최근 주문 (기본 7일)
  revenue                            매출 요약
        """,
    )
    parser.add_argument("command", help="명령어")
    parser.add_argument("args", nargs="*", help="추가 인자")
    parser.add_argument("--vip", action="store_true", help="VIP 사용자만 (users 명령)")
    parser.add_argument("--days", type=int, help="조회 기간 (일)")
    parser.add_argument("--status", choices=[s.value for s in OrderStatus], help="주문 상태 필터")

    args = parser.parse_args(argv)
    cmd = args.command

    if cmd == "stats":
        asyncio.run(cmd_stats())

    elif cmd == "users":
        asyncio.run(cmd_users(args.vip))

    elif cmd == "user":
        if not args.args:
            parser.error("이메일을 지정해주세요: admin user <email>")
        email = args.args[0]
        if len(args.args) == 1:
            asyncio.run(cmd_user_detail(email))
        elif args.args[1] == "disable":
            asyncio.run(cmd_user_toggle(email, False))
        elif args.args[1] == "enable":
            asyncio.run(cmd_user_toggle(email, True))
        else:
            parser.error(f"알 수 없는 하위 명령: {args.args[1]}")

    elif cmd == "orders":
        asyncio.run(cmd_orders(args.days or 7, args.status))

    elif cmd == "revenue":
        asyncio.run(cmd_revenue())

    else:
        parser.error(f"알 수 없는 명령: {cmd}")


if __name__ == "__main__":
    main()
