"""Built-in tour definitions."""

from __future__ import annotations
from shared.constants import (
    WHOLE_SCREEN, ROUTE_DASHBOARD, ROUTE_AGENT_WORKFLOW, ROUTE_IMMERSIVE_WORKFLOW,
    Placement, TourName,
)
from shared.models import Step, Tour


def _build_main() -> Tour:
    return Tour(TourName.MAIN.value, (
        Step(
            target=WHOLE_SCREEN,
            title="Welcome to VibeX!",
            content=(
                "Welcome to VibeX, your AI-powered development platform. "
                "Let's take a quick tour to get you started."
            ),
            placement=Placement.CENTER,
            required_route=ROUTE_DASHBOARD,
        ),
        Step(
            target="#dashboard-title",
            title="Dashboard",
            content=(
                "This is your main dashboard where you can see an overview of your "
                "projects, activities, and AI interactions."
            ),
            placement=Placement.BOTTOM,
            disable_beacon=False,
            required_route=ROUTE_DASHBOARD,
        ),
        Step(
            target="#ai-prompt-form",
            title="AI Prompt",
            content=(
                "Ask the AI what you want to build here. Our AI assistant will help "
                "you create your software."
            ),
            placement=Placement.BOTTOM,
            disable_beacon=False,
            required_route=ROUTE_DASHBOARD,
        ),
        Step(
            target=".ai-guide-bubble",
            title="AI Guide",
            content=(
                "Your personal AI guide lives in the bottom right corner. "
                "Click on it anytime for assistance."
            ),
            placement=Placement.LEFT,
        ),
        Step(
            target=WHOLE_SCREEN,
            title="Tour Complete!",
            content=(
                "You've completed the main tour! Explore the platform and don't "
                "hesitate to ask the AI guide if you need help."
            ),
            placement=Placement.CENTER,
        ),
    ))


def _build_agent_workflow() -> Tour:
    route = ROUTE_AGENT_WORKFLOW
    return Tour(TourName.AGENT_WORKFLOW.value, (
        Step(WHOLE_SCREEN, "Agent Workflow Builder",
             "This is where you can create and manage your agent workflows. "
             "Let's learn how to use it.",
             placement=Placement.CENTER, required_route=route),
        Step(".add-agent-btn", "Add Agent",
             "Click here to add a new agent to your workflow.",
             placement=Placement.BOTTOM, required_route=route),
        Step(".agent-toolbar", "Agent Types",
             "Select from different agent types: Business Analyst, Developer, "
             "QA Engineer, DevOps, and more.",
             placement=Placement.BOTTOM, required_route=route),
        Step(".canvas-controls", "Canvas Controls",
             "Use these controls to zoom, pan, and navigate the workflow canvas.",
             placement=Placement.LEFT, required_route=route),
        Step(".save-workflow-btn", "Save Workflow",
             "Don't forget to save your workflow when you're done.",
             placement=Placement.BOTTOM, required_route=route),
        Step(".execute-workflow-btn", "Execute Workflow",
             "Run your workflow and watch the agents work together.",
             placement=Placement.BOTTOM, required_route=route),
        Step(WHOLE_SCREEN, "Connect Agents",
             "Drag from an agent's output handle to another agent's input handle "
             "to create connections between them.",
             placement=Placement.CENTER),
        Step(WHOLE_SCREEN, "Tour Complete!",
             "You've completed the Agent Workflow tour! Start creating your own "
             "agent workflows now.",
             placement=Placement.CENTER),
    ))


def _build_immersive_workflow() -> Tour:
    route = ROUTE_IMMERSIVE_WORKFLOW
    return Tour(TourName.IMMERSIVE_WORKFLOW.value, (
        Step(WHOLE_SCREEN, "3D Immersive Workflow",
             "Welcome to the 3D immersive view of your agent workflows. "
             "Let's explore this immersive environment.",
             placement=Placement.CENTER, required_route=route),
        Step(".camera-controls", "Camera Controls",
             "Use these controls to rotate, zoom, and pan around the 3D environment.",
             placement=Placement.BOTTOM, required_route=route),
        Step(".add-agent-3d-btn", "Add 3D Agent",
             "Click here to add a new agent to your 3D workflow.",
             placement=Placement.BOTTOM, required_route=route),
        Step(".robot-agent", "Robot Agents",
             "These robot-like visualizations represent your agents. You can see "
             "them interact in real-time during workflow execution.",
             placement=Placement.RIGHT, required_route=route),
        Step(".save-workflow-3d-btn", "Save 3D Workflow",
             "Save your 3D workflow design before leaving the page.",
             placement=Placement.BOTTOM, required_route=route),
        Step(".execute-workflow-3d-btn", "Execute 3D Workflow",
             "Watch your robot agents come to life and perform their tasks in "
             "this immersive 3D environment.",
             placement=Placement.BOTTOM, required_route=route),
        Step(WHOLE_SCREEN, "Tour Complete!",
             "You've completed the 3D Immersive Workflow tour! Enjoy creating and "
             "visualizing your agent workflows in 3D.",
             placement=Placement.CENTER),
    ))


def builtin_tours() -> list[Tour]:
    return [_build_main(), _build_agent_workflow(), _build_immersive_workflow()]
