"""Development seeder: blogs, comments, and a bearer token per user."""
import asyncio
import argparse
import random
import time
from datetime import datetime, timezone, timedelta

from comments_api.database import engine, async_session, Base
from comments_api.models import Blog, Comment
from comments_api.security import build_access_token

TOPICS = ["python", "fastapi", "postgresql", "docker", "testing", "performance",
          "security", "asyncio", "sqlalchemy", "pydantic"]


async def seed(small: bool = False):
    num_users = 5 if small else 25
    num_blogs = 20 if small else 500
    max_comments_per_blog = 3 if small else 10

    users = [f"user_{i:04d}" for i in range(num_users)]
    print(f"Seeding: {num_users} users, {num_blogs} blogs, up to {max_comments_per_blog} comments each")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    total_comments = 0
    async with async_session() as session:
        for i in range(num_blogs):
            created = datetime.now(timezone.utc) - timedelta(days=random.randint(1, 365))
            blog = Blog(
                title=f"Blog {i}: notes on {random.choice(TOPICS)}",
                content=f"This is the body of blog {i}. " * 20,
                created_by=random.choice(users),
                created_at=created,
            )
            session.add(blog)
            await session.flush()

            count = random.randint(0, max_comments_per_blog)
            for j in range(count):
                session.add(Comment(
                    content=f"Comment {j} on blog {i}.",
                    created_by=random.choice(users),
                    blog_id=blog.id,
                    created_at=created + timedelta(minutes=j + 1),
                ))
            blog.comments = count
            total_comments += count

        await session.commit()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Blogs: {num_blogs}")
    print(f"  Comments: {total_comments}")
    print("\nBearer tokens:")
    for user in users[:3]:
        print(f"  {user}: {build_access_token(user_id=user, expires_in=7 * 24 * 3600)}")

    await engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="Seed the comments database")
    parser.add_argument("--small", action="store_true", help="Use small dataset (20 blogs)")
    args = parser.parse_args()
    asyncio.run(seed(small=args.small))


if __name__ == "__main__":
    main()
