"""Seed demo projects with members and tasks."""
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select

from fairwork.database import async_session_maker, init_db
from fairwork.models.member import Member, MemberRole
from fairwork.models.project import Project
from fairwork.models.task import Task, TaskStatus

# (name, role, manual_hours, manual_tasks)
# (title, description, assignee name or None, hours, status)
DEMO_PROJECTS = [
    {
        "name": "E-Commerce Platform",
        "description": "Building a full-stack online shopping platform with React and Node.js",
        "total_tasks_needed": 50,
        "project_lead": "Alice Johnson",
        "members": [
            ("Alice Johnson", MemberRole.MEMBER, 42, 28),
            ("Bob Smith", MemberRole.MEMBER, 8, 5),
            ("Charlie Davis", MemberRole.MEMBER, 6, 3),
        ],
        "tasks": [
            ("Database Schema Design", "Design and implement PostgreSQL schema", "Alice Johnson", 8, TaskStatus.DONE),
            ("Product Catalog API", "REST API for product CRUD operations", "Alice Johnson", 12, TaskStatus.DONE),
            ("Shopping Cart Frontend", "Build cart UI with React", "Alice Johnson", 10, TaskStatus.IN_PROGRESS),
            ("Payment Integration", "Integrate Stripe payment gateway", "Alice Johnson", 8, TaskStatus.IN_PROGRESS),
            ("User Authentication", "Implement JWT-based auth", "Alice Johnson", 6, TaskStatus.DONE),
            ("Product Search", "Elasticsearch integration for product search", "Bob Smith", 5, TaskStatus.DONE),
            ("Order History Page", "Display user order history", "Bob Smith", 4, TaskStatus.TODO),
            ("Admin Dashboard", "Build admin panel for product management", "Charlie Davis", 6, TaskStatus.TODO),
            ("Email Notifications", "Order confirmation emails", None, 3, TaskStatus.TODO),
            ("Testing Suite", "Unit and integration tests", None, 8, TaskStatus.TODO),
        ],
    },
    {
        "name": "Mobile Fitness App",
        "description": "Cross-platform fitness tracking application with workout plans and nutrition",
        "total_tasks_needed": 40,
        "project_lead": "Alice Johnson",
        "members": [
            ("Alice Johnson", MemberRole.MEMBER, 25, 18),
            ("Diana Martinez", MemberRole.SHERPA, 24, 16),
            ("Bob Smith", MemberRole.MEMBER, 7, 4),
            ("Charlie Davis", MemberRole.MEMBER, 5, 2),
        ],
        "tasks": [
            ("Workout Library UI", "Design and build exercise catalog", "Alice Johnson", 10, TaskStatus.DONE),
            ("Progress Tracking", "Charts and graphs for user progress", "Alice Johnson", 8, TaskStatus.DONE),
            ("Nutrition Calculator", "Calorie and macro tracking", "Alice Johnson", 7, TaskStatus.IN_PROGRESS),
            ("User Profile System", "Profile management and settings", "Diana Martinez", 6, TaskStatus.DONE),
            ("Workout Plans API", "Backend for custom workout plans", "Diana Martinez", 9, TaskStatus.DONE),
            ("Social Features", "Friend system and activity feed", "Diana Martinez", 8, TaskStatus.IN_PROGRESS),
            ("Push Notifications", "Workout reminders and notifications", "Bob Smith", 5, TaskStatus.DONE),
            ("Video Tutorial Integration", "Embed exercise video guides", "Bob Smith", 4, TaskStatus.TODO),
            ("Offline Mode", "Local data sync for offline use", "Charlie Davis", 6, TaskStatus.TODO),
            ("Performance Testing", "Load testing and optimization", None, 4, TaskStatus.TODO),
        ],
    },
    {
        "name": "AI Chatbot System",
        "description": "Intelligent customer service chatbot using machine learning and NLP",
        "total_tasks_needed": 35,
        "project_lead": "Diana Martinez",
        "members": [
            ("Diana Martinez", MemberRole.MEMBER, 22, 14),
            ("Charlie Davis", MemberRole.MEMBER, 19, 11),
            ("Bob Smith", MemberRole.MEMBER, 18, 10),
        ],
        "tasks": [
            ("NLP Model Training", "Train intent classification model", "Diana Martinez", 12, TaskStatus.DONE),
            ("Conversation Flow Design", "Design dialogue trees and responses", "Diana Martinez", 8, TaskStatus.DONE),
            ("Chat Interface", "Build web chat widget", "Charlie Davis", 9, TaskStatus.DONE),
            ("Backend API", "REST API for chat processing", "Charlie Davis", 10, TaskStatus.IN_PROGRESS),
            ("Knowledge Base Integration", "Connect to FAQ database", "Bob Smith", 7, TaskStatus.DONE),
            ("Analytics Dashboard", "Track conversation metrics", "Bob Smith", 8, TaskStatus.DONE),
            ("Multi-language Support", "Implement language detection", "Diana Martinez", 6, TaskStatus.TODO),
            ("Sentiment Analysis", "Detect user emotion in messages", "Bob Smith", 5, TaskStatus.IN_PROGRESS),
            ("Admin Panel", "Manage bot responses and settings", None, 6, TaskStatus.TODO),
            ("Load Testing", "Test concurrent conversation handling", None, 4, TaskStatus.TODO),
        ],
    },
]


async def seed():
    await init_db()
    async with async_session_maker() as db:
        for demo in DEMO_PROJECTS:
            r = await db.execute(select(Project).where(Project.name == demo["name"]))
            if r.scalar_one_or_none():
                continue
            project = Project(
                name=demo["name"],
                description=demo["description"],
                total_tasks_needed=demo["total_tasks_needed"],
                project_lead=demo["project_lead"],
            )
            db.add(project)
            await db.flush()

            members_by_name: dict[str, Member] = {}
            for name, role, hours, task_count in demo["members"]:
                member = Member(
                    project_id=project.id,
                    name=name,
                    role=role,
                    manual_hours=Decimal(hours),
                    manual_tasks=task_count,
                )
                db.add(member)
                members_by_name[name] = member
            await db.flush()

            for title, description, assignee, hours, status in demo["tasks"]:
                db.add(Task(
                    project_id=project.id,
                    title=title,
                    description=description,
                    assigned_to=members_by_name[assignee].id if assignee else None,
                    hours=Decimal(hours),
                    status=status,
                ))
        await db.commit()
    print(f"Seeded {len(DEMO_PROJECTS)} demo projects")


if __name__ == "__main__":
    asyncio.run(seed())
