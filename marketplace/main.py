#!/usr/bin/env python3
"""
마켓플레이스 API 메인 엔트리 포인트
"""
import asyncio

import click
from loguru import logger

from marketplace.config import settings
from marketplace.monitoring import setup_logging
from marketplace.storage.database import close_db, get_session_factory, init_db
from marketplace.storage.users import UserRepository


@click.group()
def cli():
    """마켓플레이스 API CLI"""
    setup_logging(log_level=settings.log_level, log_file=settings.log_file)


@cli.command()
def serve():
    """API 서버 실행"""
    from marketplace.api.main import run

    run()


@cli.command("init-db")
def init_db_command():
    """DB 테이블 생성"""

    async def _run():
        try:
            await init_db()
        finally:
            await close_db()

    asyncio.run(_run())
    logger.info("DB 초기화 완료")


async def promote(no_telp: str) -> bool:
    """
    회원에게 관리자 권한 부여

    Returns:
        회원이 존재하면 True
    """
    async with get_session_factory()() as session:
        user = await UserRepository(session).find_by_no_telp(no_telp)
        if user is None:
            return False
        user.is_admin = True
        await session.commit()
        return True


@cli.command("promote-admin")
@click.option("--no-telp", "no_telp", required=True, help="관리자로 지정할 회원의 전화번호")
def promote_admin(no_telp: str):
    """회원을 관리자로 지정 (다시 로그인해야 토큰에 반영)"""

    async def _run() -> bool:
        try:
            return await promote(no_telp)
        finally:
            await close_db()

    if not asyncio.run(_run()):
        raise click.ClickException(f"회원을 찾을 수 없습니다: no_telp={no_telp}")

    logger.info(f"관리자 지정 완료: no_telp={no_telp}")


if __name__ == "__main__":
    cli()
