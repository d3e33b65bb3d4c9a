from datetime import timedelta

from app.database import SessionLocal, engine, Base
from app.models import Content, User, WorkflowInstance, WorkflowStep, WorkflowTemplate
from app.schemas.workflow import WorkflowStepCreate
from app.services.generation import generate_content
from app.services.lifecycle import approve_content
from app.services.scheduling import schedule_content
from app.services.workflow_instances import advance_workflow, start_workflow
from app.services.workflow_templates import create_workflow_template
from app.timeutils import utcnow

# Create tables
Base.metadata.create_all(bind=engine)

db = SessionLocal()

# Clear existing data
db.query(WorkflowInstance).delete()
db.query(WorkflowStep).delete()
db.query(WorkflowTemplate).delete()
db.query(Content).delete()
db.query(User).delete()
db.commit()

# Users
owner = User(email="creator@example.com", name="Casey Creator")
reviewer = User(email="reviewer@example.com", name="Robin Reviewer")
db.add_all([owner, reviewer])
db.commit()

# Standard review template
template = create_workflow_template(
    db,
    user_id=owner.id,
    name="Standard review",
    description="Draft, peer review, manager approval, then schedule",
    steps=[
        WorkflowStepCreate(step_order=1, step_type="generation", required=True),
        WorkflowStepCreate(step_order=2, step_type="review", required=False),
        WorkflowStepCreate(step_order=3, step_type="approval", required=True, assignee_id=reviewer.id),
        WorkflowStepCreate(step_order=4, step_type="scheduling", required=True),
    ],
)

# Sample content
prompts = [
    ("spring product launch", "instagram", "post", "promotional"),
    ("remote team rituals", "linkedin", "post", "professional"),
    ("monday motivation", "twitter", "tweet", "inspirational"),
]
drafts = [
    generate_content(db, owner.id, prompt, platform, content_type, tone=tone)
    for prompt, platform, content_type, tone in prompts
]

# First draft waits on the reviewer
instance = start_workflow(db, drafts[0].id, template.id)
advance_workflow(db, instance.id)
advance_workflow(db, instance.id)

# Second draft is approved and on the calendar
approve_content(db, drafts[1].id, approved_by=reviewer.id, approved=True)
schedule_content(db, drafts[1].id, utcnow() + timedelta(days=3))

print("Database seeded successfully!")
print("  - 2 users")
print(f"  - 1 workflow template ({len(template.steps)} steps)")
print(f"  - {len(drafts)} content items")

db.close()
