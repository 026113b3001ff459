"""Mermaid templates for every supported diagram type.

Two banks live here. TEMPLATES is the fallback output when no model
produces a usable diagram; EXAMPLES is the starter text the input form shows
when a diagram type is picked.
"""

from rechart.engine.types import DiagramType

MINDMAP_ROOT_DEFAULT = "Main Topic"

MINDMAP_TEMPLATE = """mindmap
  root(({root}))
    Branch 1
      Sub-topic A
      Sub-topic B
    Branch 2
      Sub-topic C
      Sub-topic D"""

TEMPLATES: dict[DiagramType, str] = {
    DiagramType.FLOWCHART: """graph TD
    A[Start] --> B{Decision Point}
    B -->|Yes| C[Process A]
    B -->|No| D[Process B]
    C --> E[End]
    D --> E""",
    DiagramType.MINDMAP: MINDMAP_TEMPLATE,
    DiagramType.ORGCHART: """graph TD
    CEO[CEO/Manager] --> A[Team Lead A]
    CEO --> B[Team Lead B]
    A --> A1[Member 1]
    A --> A2[Member 2]
    B --> B1[Member 3]
    B --> B2[Member 4]""",
    DiagramType.SEQUENCE: """sequenceDiagram
    participant User as User
    participant System as System
    participant Database as Database

    User->>System: Login Request
    System->>Database: Validate Credentials
    Database-->>System: User Data
    System-->>User: Authentication Success

    User->>System: Data Request
    System->>Database: Query Data
    Database-->>System: Return Results
    System-->>User: Display Data""",
    DiagramType.NETWORK: """graph LR
    A[Server] --> B[Router]
    B --> C[Switch]
    C --> D[Device 1]
    C --> E[Device 2]
    C --> F[Device 3]""",
    DiagramType.GANTT: """gantt
    title Project Timeline
    dateFormat YYYY-MM-DD
    section Phase 1
    Task 1: 2024-01-01, 30d
    Task 2: after task1, 20d
    section Phase 2
    Task 3: 2024-02-15, 25d""",
    DiagramType.GITGRAPH: """gitGraph
    commit
    branch develop
    checkout develop
    commit
    commit
    checkout main
    merge develop
    commit""",
    DiagramType.JOURNEY: """journey
    title User Journey
    section Discovery
      Visit Site: 5: User
      Browse: 4: User
    section Action
      Sign Up: 3: User
      Complete: 5: User""",
}

EXAMPLES: dict[DiagramType, str] = {
    DiagramType.FLOWCHART: """graph TD
    A[Start] --> B{Decision?}
    B -->|Yes| C[Process A]
    B -->|No| D[Process B]
    C --> E[End]
    D --> E""",
    DiagramType.MINDMAP: """mindmap
  root((Central Idea))
    Branch 1
      Sub-idea 1
      Sub-idea 2
    Branch 2
      Sub-idea 3
      Sub-idea 4""",
    DiagramType.ORGCHART: """graph TD
    CEO[CEO] --> CTO[CTO]
    CEO --> CFO[CFO]
    CTO --> Dev1[Developer 1]
    CTO --> Dev2[Developer 2]
    CFO --> Acc1[Accountant]""",
    DiagramType.SEQUENCE: """sequenceDiagram
    participant A as User
    participant B as System
    A->>B: Login Request
    B->>A: Authentication
    A->>B: Data Request
    B->>A: Data Response""",
    DiagramType.NETWORK: """graph LR
    A[Server] --> B[Router]
    B --> C[Switch]
    C --> D[Computer 1]
    C --> E[Computer 2]""",
    DiagramType.GANTT: TEMPLATES[DiagramType.GANTT],
    DiagramType.GITGRAPH: """gitGraph
    commit
    branch develop
    checkout develop
    commit
    commit
    checkout main
    merge develop""",
    DiagramType.JOURNEY: """journey
    title User Shopping Journey
    section Discovery
      Visit Website: 5: User
      Browse Products: 4: User
    section Purchase
      Add to Cart: 3: User
      Checkout: 2: User
      Payment: 1: User""",
}


def mindmap_root(description: str | None) -> str:
    """First two words of the description, or the default label."""
    words = (description or "").split()[:2]
    return " ".join(words) or MINDMAP_ROOT_DEFAULT


def diagram_template(diagram_type: str, description: str | None = "") -> str:
    """Fallback Mermaid source for a diagram type.

    Unknown types get the flowchart template. The mindmap root node is
    labelled from the description.
    """
    kind = DiagramType.lookup(diagram_type) or DiagramType.FLOWCHART

    if kind is DiagramType.MINDMAP:
        return MINDMAP_TEMPLATE.format(root=mindmap_root(description))
    return TEMPLATES[kind]


def diagram_example(diagram_type: str) -> str:
    """Starter Mermaid text for the input form; empty for unknown types."""
    kind = DiagramType.lookup(diagram_type)
    if kind is None:
        return ""
    return EXAMPLES[kind]
