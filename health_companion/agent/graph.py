# health_companion/agent/graph.py
from langgraph.graph import START, END, StateGraph
from langgraph.checkpoint.memory import InMemorySaver
from langgraph.checkpoint.sqlite import SqliteSaver

from health_companion.agent.state import AssessmentState
from health_companion.agent.nodes import extract_node, match_node, safety_node, report_node, route_after_match
from health_companion.core.config import CHECKPOINT_BACKEND
from health_companion.db.db_config import get_sqlite_connection

def build_checkpointer():
    if CHECKPOINT_BACKEND == "memory":
        return InMemorySaver()
    return SqliteSaver(get_sqlite_connection())

builder = StateGraph(AssessmentState)

builder.add_node("extract", extract_node)
builder.add_node("match", match_node)
builder.add_node("safety", safety_node)
builder.add_node("report", report_node)

builder.add_edge(START, "extract")
builder.add_edge("extract", "match")

builder.add_conditional_edges("match", route_after_match, {
    "safety": "safety",
    "report": "report",
})

builder.add_edge("safety", "report")
builder.add_edge("report", END)

assessment_graph = builder.compile(checkpointer=build_checkpointer())
