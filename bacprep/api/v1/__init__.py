"""API v1 router."""
from fastapi import APIRouter

from bacprep.api.v1 import achievements, ai, auth, chat, demo, progress, study_plan, subjects, tests, users

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(users.router, tags=["Users"])
api_router.include_router(subjects.router, prefix="/subjects", tags=["Subjects"])
api_router.include_router(progress.router, tags=["Progress"])
api_router.include_router(tests.router, tags=["Tests"])
api_router.include_router(achievements.router, tags=["Achievements"])
api_router.include_router(study_plan.router, tags=["Study Plan"])
api_router.include_router(ai.router, prefix="/ai", tags=["AI Tutor"])
api_router.include_router(chat.router, tags=["AI Tutor"])
api_router.include_router(demo.router, tags=["Demo"])
