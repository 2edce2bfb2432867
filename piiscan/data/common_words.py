"""
Common English Words

The bundled common-word list behind CommonWordDictionary. A capitalized
word found here is probably an ordinary word that happens to start a
sentence or a heading; words outside it raise the unknown-word ratio of a
proper-noun candidate.

Entries are lowercase. Given names and surnames are kept out of the list so
that "John Doe" stays fully unknown.
"""
from typing import FrozenSet

# ============================================================================
# Function words
# ============================================================================
FUNCTION_WORDS = {
    "a", "about", "above", "after", "again", "against", "all", "also", "am",
    "an", "and", "any", "are", "as", "at", "be", "because", "been", "before",
    "being", "below", "between", "both", "but", "by", "can", "could", "did",
    "do", "does", "doing", "down", "during", "each", "either", "else",
    "every", "few", "for", "from", "further", "had", "has", "have", "having",
    "he", "her", "here", "hers", "herself", "him", "himself", "his", "how",
    "however", "i", "if", "in", "into", "is", "it", "its", "itself", "just",
    "least", "less", "many", "me", "might", "more", "most", "much", "must",
    "my", "myself", "neither", "no", "nor", "not", "now", "of", "off", "on",
    "once", "only", "or", "other", "our", "ours", "ourselves", "out", "over",
    "own", "per", "same", "shall", "she", "should", "since", "so", "some",
    "such", "than", "that", "the", "their", "theirs", "them", "themselves",
    "then", "there", "these", "they", "this", "those", "though", "through",
    "thus", "to", "too", "toward", "towards", "under", "until", "up", "upon",
    "us", "very", "via", "was", "we", "were", "what", "when", "where",
    "whether", "which", "while", "who", "whom", "whose", "why", "will",
    "with", "within", "without", "would", "yet", "you", "your", "yours",
    "yourself", "yourselves", "please", "thanks", "thank", "hello", "hi",
    "dear", "regards", "sincerely", "welcome", "yes", "okay", "ok",
}

# ============================================================================
# Business & workplace vocabulary
# ============================================================================
BUSINESS_WORDS = {
    "account", "accounting", "accounts", "action", "activity", "administration",
    "agenda", "agreement", "amount", "analysis", "analytics", "annual",
    "application", "approval", "approved", "area", "assessment", "asset",
    "assets", "assistant", "audit", "average", "balance", "bank", "benefit",
    "benefits", "billing", "board", "budget", "business", "buyer", "campaign",
    "capital", "career", "cash", "center", "centre", "chart", "client",
    "clients", "committee", "communications", "company", "compliance",
    "conference", "contract", "contracts", "cost", "costs", "customer",
    "customers", "dashboard", "data", "deadline", "deal", "department",
    "deposit", "design", "desk", "development", "director", "discount",
    "division", "document", "documents", "draft", "earnings", "employee",
    "employees", "engineering", "enterprise", "estimate", "event", "expense",
    "expenses", "facilities", "feedback", "finance", "financial", "fiscal",
    "forecast", "freelance", "fund", "funding", "goal", "goals", "group",
    "growth", "headquarters", "hiring", "human", "income", "index",
    "initiative", "insurance", "interview", "inventory", "investment",
    "investor", "invoice", "invoices", "job", "key", "launch", "lead",
    "leadership", "legal", "loan", "logistics", "management", "manager",
    "margin", "market", "marketing", "meeting", "meetings", "member",
    "members", "memo", "metric", "metrics", "milestone", "mission",
    "monthly", "net", "notes", "objective", "objectives", "office",
    "officer", "onboarding", "operations", "order", "orders", "organization",
    "outlook", "overview", "owner", "partner", "partnership", "payment",
    "payments", "payroll", "performance", "period", "personnel", "plan",
    "planning", "policy", "portfolio", "position", "presentation", "price",
    "pricing", "priority", "procedure", "process", "procurement", "product",
    "production", "products", "profile", "profit", "program", "progress",
    "project", "projects", "proposal", "purchase", "purchasing", "quality",
    "quarter", "quarterly", "rate", "receipt", "record", "records",
    "recruiting", "refund", "relations", "report", "reports", "request",
    "requirements", "research", "resources", "retail", "revenue", "review",
    "risk", "role", "salary", "sales", "satisfaction", "schedule", "security",
    "service", "services", "session", "share", "shares", "shipping", "staff",
    "stakeholder", "statement", "status", "stock", "strategy", "summary",
    "supplier", "supply", "support", "survey", "target", "task", "tasks",
    "tax", "team", "teams", "terms", "timeline", "total", "training",
    "transaction", "transfer", "travel", "trend", "unit", "update", "updates",
    "value", "vendor", "volume", "wage", "weekly", "workflow", "workshop",
    "yearly", "senior", "junior", "chief", "principal", "associate",
    "engineer", "developer", "designer", "analyst", "writer", "reporter",
    "editor", "architect", "scientist", "consultant", "technician",
    "specialist", "intern", "coordinator", "executive", "president",
    "secretary", "treasurer", "tech", "technology", "technologies",
    "software", "hardware", "system", "systems", "solutions", "network",
    "platform", "portal", "server", "database", "email", "phone", "address",
    "contact", "website", "online", "digital", "global", "international",
    "national", "regional", "local", "general", "public", "private",
    "new", "old", "first", "last", "next", "previous", "final",
}

# ============================================================================
# Everyday vocabulary
# ============================================================================
GENERAL_WORDS = {
    "able", "access", "across", "add", "added", "advice", "age", "ago",
    "air", "allow", "almost", "alone", "along", "already", "always",
    "another", "answer", "anyone", "anything", "apply", "april", "around",
    "arrive", "article", "ask", "attention", "august", "available", "away",
    "back", "bad", "bay", "become", "begin", "behind", "believe", "best",
    "better", "big", "bill", "black", "blue", "body", "book", "bottom",
    "box", "break", "bring", "build", "call", "called", "came", "car",
    "care", "case", "cause", "certain", "change", "changes", "check",
    "child", "children", "choose", "city", "class", "clear", "close",
    "code", "cold", "color", "come", "coming", "common", "community",
    "complete", "computer", "consider", "continue", "control", "copy",
    "correct", "country", "course", "cover", "create", "current", "cut",
    "daily", "date", "day", "days", "december", "decide", "decision",
    "deep", "detail", "details", "different", "difficult", "direct",
    "discuss", "done", "door", "download", "drive", "early", "easy", "east",
    "edit", "education", "effect", "effort", "end", "enough", "enter",
    "entire", "even", "evening", "ever", "everyone", "everything", "example",
    "experience", "explain", "eye", "face", "fact", "fall", "family", "far",
    "fast", "february", "feel", "field", "figure", "file", "files", "fill",
    "find", "fine", "finish", "fire", "follow", "following", "food", "form",
    "forward", "free", "friday", "friend", "front", "full", "future", "game",
    "get", "give", "given", "go", "going", "good", "great", "green", "ground",
    "grow", "guide", "half", "hand", "happy", "hard", "head", "health",
    "hear", "heart", "help", "high", "history", "hold", "home", "hope",
    "hot", "hour", "hours", "house", "idea", "important", "include",
    "including", "increase", "information", "inside", "instead", "interest",
    "issue", "issues", "item", "items", "january", "join", "july", "june",
    "keep", "kind", "know", "known", "land", "language", "large", "late",
    "later", "law", "learn", "leave", "left", "letter", "level", "life",
    "light", "like", "line", "link", "list", "little", "live", "long",
    "look", "lot", "love", "low", "main", "make", "man", "march", "mark",
    "matter", "may", "mean", "measure", "media", "message", "middle", "mind",
    "minute", "minutes", "miss", "model", "moment", "monday", "money",
    "month", "months", "morning", "move", "music", "name", "need", "never",
    "news", "nice", "night", "none", "north", "note", "nothing", "notice",
    "november", "number", "october", "offer", "often", "open", "option",
    "options", "page", "paper", "part", "party", "pass", "past", "pay",
    "people", "person", "phase", "picture", "place", "play", "point",
    "possible", "power", "prepare", "present", "press", "problem", "provide",
    "put", "question", "questions", "quick", "quite", "rather", "reach",
    "read", "ready", "real", "reason", "receive", "recent", "red", "remember",
    "reply", "rest", "result", "results", "return", "right", "room", "round",
    "rule", "run", "safe", "saturday", "save", "say", "school", "second",
    "section", "see", "seem", "send", "sent", "september", "set", "several",
    "short", "show", "side", "sign", "simple", "site", "size", "small",
    "social", "someone", "something", "sometimes", "soon", "sorry", "sound",
    "south", "space", "speak", "special", "stand", "start", "state", "step",
    "still", "stop", "story", "street", "strong", "study", "subject",
    "success", "sunday", "sure", "table", "take", "talk", "tell", "test",
    "text", "thing", "things", "think", "thursday", "time", "times", "title",
    "today", "together", "tomorrow", "top", "topic", "town", "tuesday",
    "turn", "type", "understand", "upcoming", "use", "used", "user", "users",
    "usually", "various", "version", "view", "visit", "visualize", "wait",
    "want", "watch", "water", "way", "wednesday", "week", "weeks", "well",
    "west", "white", "whole", "wide", "window", "woman", "word", "words",
    "work", "working", "world", "write", "year", "years", "yesterday",
    "young", "zone", "click", "here", "login", "logout", "sign", "search",
    "home", "menu", "settings", "profile", "privacy", "terms", "cookie",
    "cookies", "share", "like", "comment", "comments", "subscribe", "about",
    "blog", "post", "posts", "contents", "introduction", "conclusion",
    "chapter", "appendix", "figure", "note", "warning", "important",
    "tip", "step", "steps", "question", "answer", "faq", "help",
}

COMMON_WORDS: FrozenSet[str] = frozenset(FUNCTION_WORDS | BUSINESS_WORDS | GENERAL_WORDS)
