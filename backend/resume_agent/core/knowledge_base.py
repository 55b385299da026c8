"""Static reference data used to analyze postings and assemble resumes.

Everything here is read-only. Order matters wherever a table is scanned
first-match-wins (seniority patterns, industries, title patterns) or used as
a fallback (the first two skill categories, the first title per domain).
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import Field, field_validator

from resume_agent.models import (
    EducationTemplate,
    ExperienceLevel,
    FrozenModel,
    SeniorityPattern,
    SkillCategory,
    TitlePattern,
)

# ---------------------------------------------------------------------------
# Skill categories
# ---------------------------------------------------------------------------

SKILL_CATEGORIES = (
    SkillCategory(
        name="Frontend",
        keywords=(
            "frontend", "front-end", "ui", "ux", "react", "angular", "vue", "svelte",
            "html", "css", "sass", "scss", "tailwind", "bootstrap", "javascript",
            "typescript", "web", "responsive", "dom", "spa", "pwa", "nextjs", "next.js",
            "nuxt", "gatsby",
        ),
        skills=(
            "React", "Angular", "Vue.js", "TypeScript", "JavaScript", "HTML5", "CSS3",
            "SASS/SCSS", "Tailwind CSS", "Bootstrap", "Responsive Design", "Redux",
            "Next.js", "Webpack", "REST APIs",
        ),
    ),
    SkillCategory(
        name="Backend",
        keywords=(
            "backend", "back-end", "server", "api", "node", "nodejs", "express", "nestjs",
            "django", "flask", "spring", "java", "python", "ruby", "rails", "php",
            "laravel", "golang", "go", "rust", ".net", "c#", "microservices", "graphql",
            "rest", "grpc",
        ),
        skills=(
            "Node.js", "Express.js", "Python", "Django", "Java", "Spring Boot",
            "REST API Design", "GraphQL", "Microservices Architecture",
            "Authentication & Authorization", "API Security", "Server-Side Rendering",
        ),
    ),
    SkillCategory(
        name="Database",
        keywords=(
            "database", "sql", "nosql", "mongodb", "postgres", "postgresql", "mysql",
            "redis", "elasticsearch", "dynamodb", "cassandra", "oracle", "sqlite",
            "prisma", "sequelize", "mongoose", "orm", "data modeling",
        ),
        skills=(
            "MongoDB", "PostgreSQL", "MySQL", "Redis", "Elasticsearch", "Database Design",
            "Query Optimization", "Data Modeling", "ORM (Prisma/Sequelize)",
            "Database Migration",
        ),
    ),
    SkillCategory(
        name="Cloud & DevOps",
        keywords=(
            "aws", "azure", "gcp", "cloud", "docker", "kubernetes", "k8s", "ci/cd", "cicd",
            "jenkins", "terraform", "ansible", "devops", "deployment", "infrastructure",
            "lambda", "s3", "ec2", "ecs", "fargate", "cloudformation", "helm", "serverless",
        ),
        skills=(
            "AWS (EC2, S3, Lambda, ECS)", "Docker", "Kubernetes", "CI/CD Pipelines",
            "Terraform", "GitHub Actions", "Infrastructure as Code", "Cloud Architecture",
            "Serverless", "Linux Administration",
        ),
    ),
    SkillCategory(
        name="Data Science & ML",
        keywords=(
            "machine learning", "ml", "ai", "artificial intelligence", "data science",
            "deep learning", "nlp", "natural language", "tensorflow", "pytorch", "pandas",
            "numpy", "scikit", "computer vision", "neural network", "model training",
            "data analysis", "analytics", "statistics", "regression", "classification",
        ),
        skills=(
            "Python", "TensorFlow", "PyTorch", "Scikit-learn", "Pandas", "NumPy",
            "Data Analysis", "Machine Learning", "Deep Learning",
            "Natural Language Processing", "Statistical Modeling", "Data Visualization",
        ),
    ),
    SkillCategory(
        name="Mobile",
        keywords=(
            "mobile", "ios", "android", "react native", "flutter", "swift", "kotlin",
            "xamarin", "ionic", "app development", "mobile app",
        ),
        skills=(
            "React Native", "Flutter", "iOS (Swift)", "Android (Kotlin)", "Mobile UI/UX",
            "App Store Deployment", "Push Notifications",
            "Mobile Performance Optimization", "Cross-Platform Development",
        ),
    ),
    SkillCategory(
        name="Security",
        keywords=(
            "security", "cybersecurity", "penetration", "vulnerability", "encryption",
            "oauth", "jwt", "authentication", "authorization", "firewall", "compliance",
            "soc", "gdpr", "hipaa", "owasp",
        ),
        skills=(
            "Application Security", "OAuth 2.0 / JWT", "OWASP Top 10",
            "Vulnerability Assessment", "Encryption", "Security Auditing",
            "Identity & Access Management", "Compliance (GDPR/HIPAA)",
            "Penetration Testing",
        ),
    ),
    SkillCategory(
        name="Testing & QA",
        keywords=(
            "testing", "test", "qa", "quality", "jest", "mocha", "cypress", "selenium",
            "playwright", "unit test", "integration test", "e2e", "tdd", "bdd",
            "automation testing",
        ),
        skills=(
            "Jest", "Cypress", "Selenium", "Playwright", "Unit Testing",
            "Integration Testing", "E2E Testing", "Test-Driven Development",
            "CI/CD Testing", "Performance Testing",
        ),
    ),
    SkillCategory(
        name="Project Management",
        keywords=(
            "agile", "scrum", "kanban", "project management", "jira", "confluence",
            "product", "stakeholder", "roadmap", "sprint", "backlog", "product owner",
            "scrum master", "waterfall", "lean",
        ),
        skills=(
            "Agile/Scrum", "Jira", "Confluence", "Sprint Planning",
            "Stakeholder Management", "Roadmap Development",
            "Cross-functional Collaboration", "Risk Management", "OKR/KPI Tracking",
        ),
    ),
    SkillCategory(
        name="Design",
        keywords=(
            "design", "figma", "sketch", "adobe", "photoshop", "illustrator", "ui/ux",
            "wireframe", "prototype", "user research", "accessibility", "wcag",
            "design system",
        ),
        skills=(
            "Figma", "Adobe Creative Suite", "UI/UX Design", "Wireframing", "Prototyping",
            "User Research", "Design Systems", "Accessibility (WCAG)", "Visual Design",
            "Interaction Design",
        ),
    ),
)

# Senior is checked first so "senior" wins over e.g. "associate" in the same posting.
SENIORITY_PATTERNS = (
    SeniorityPattern(
        level=ExperienceLevel.SENIOR,
        years_range="7+",
        keywords=(
            "senior", "sr.", "lead", "principal", "staff", "architect", "7+ years",
            "8+ years", "10+ years", "5+ years", "extensive experience", "deep expertise",
        ),
    ),
    SeniorityPattern(
        level=ExperienceLevel.MID_LEVEL,
        years_range="3-5",
        keywords=(
            "mid", "intermediate", "3+ years", "4+ years", "3-5 years", "2-4 years",
            "solid experience", "proven track record",
        ),
    ),
    SeniorityPattern(
        level=ExperienceLevel.JUNIOR,
        years_range="0-2",
        keywords=(
            "junior", "jr.", "entry", "associate", "graduate", "intern", "0-2 years",
            "1+ year", "1-2 years", "new grad", "early career", "entry level",
            "entry-level",
        ),
    ),
)

# ---------------------------------------------------------------------------
# Posting classifiers
# ---------------------------------------------------------------------------

DOMAIN_KEYWORDS = (
    ("frontend", ("frontend", "front-end", "react", "angular", "vue", "ui", "ux", "css", "html")),
    ("backend", ("backend", "back-end", "server", "api", "node", "django", "spring", "microservices")),
    ("fullstack", ("full stack", "fullstack", "full-stack", "mern", "mean")),
    ("devops", ("devops", "ci/cd", "docker", "kubernetes", "infrastructure", "sre")),
    ("data", ("data science", "machine learning", "data engineer", "analytics", "ml", "ai")),
    ("mobile", ("mobile", "ios", "android", "react native", "flutter")),
    ("security", ("security", "cybersecurity", "penetration", "owasp")),
    ("cloud", ("cloud", "aws", "azure", "gcp", "solutions architect")),
    ("qa", ("qa", "testing", "quality assurance", "test automation", "sdet")),
    ("management", ("engineering manager", "tech lead", "team lead", "director of engineering")),
    ("design", ("ux design", "ui design", "product design", "figma")),
)

# First industry with any hit wins.
INDUSTRY_KEYWORDS = (
    ("finance", ("fintech", "financial", "banking", "payment", "trading", "investment", "insurance")),
    ("healthcare", ("healthcare", "health", "medical", "clinical", "patient", "pharma", "biotech")),
    ("ecommerce", ("ecommerce", "e-commerce", "retail", "marketplace", "shopping", "commerce")),
    ("tech", ("saas", "platform", "software", "tech", "startup", "product")),
)

TECHNOLOGY_PATTERNS = (
    "react", "angular", "vue", "node.js", "nodejs", "express", "django", "flask",
    "spring", "java", "python", "typescript", "javascript", "go", "golang", "rust",
    "c#", ".net", "ruby", "rails", "php", "laravel", "swift", "kotlin",
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform",
    "mongodb", "postgresql", "mysql", "redis", "elasticsearch",
    "graphql", "rest", "grpc", "kafka", "rabbitmq",
    "jenkins", "github actions", "circleci", "gitlab",
    "jest", "cypress", "selenium", "playwright",
    "figma", "sketch", "storybook",
    "tensorflow", "pytorch", "pandas", "scikit-learn",
    "react native", "flutter", "next.js", "nuxt", "svelte",
    "tailwind", "bootstrap", "material ui", "sass", "scss",
)

_TITLE_TAIL = r"\s+(\w+\s+\w+(?:\s+\w+)?)"

TITLE_PATTERNS = (
    TitlePattern(pattern=r"(?:senior|sr\.?)" + _TITLE_TAIL, prefix="Senior "),
    TitlePattern(pattern=r"(?:junior|jr\.?)" + _TITLE_TAIL, prefix="Junior "),
    TitlePattern(pattern=r"(?:lead)" + _TITLE_TAIL, prefix="Lead "),
    TitlePattern(pattern=r"(?:staff)" + _TITLE_TAIL, prefix="Staff "),
)

# Filtered out of TF-IDF keywords on top of the vectorizer's English list.
STOP_WORDS = frozenset({
    "the", "and", "for", "with", "you", "our", "will", "are", "have", "this", "that",
    "from", "your", "can", "about", "more", "what", "who", "how", "been", "were",
    "able", "must", "should", "would", "could",
})

# ---------------------------------------------------------------------------
# Content generation
# ---------------------------------------------------------------------------

# Ordered: bullet N uses group N % len(ACTION_VERBS).
ACTION_VERBS = (
    ("development", ("Developed", "Engineered", "Built", "Implemented", "Designed", "Created", "Architected", "Constructed", "Programmed", "Coded")),
    ("leadership", ("Led", "Managed", "Directed", "Coordinated", "Oversaw", "Mentored", "Guided", "Supervised", "Spearheaded", "Championed")),
    ("improvement", ("Optimized", "Improved", "Enhanced", "Streamlined", "Refactored", "Accelerated", "Reduced", "Increased", "Modernized", "Upgraded")),
    ("collaboration", ("Collaborated", "Partnered", "Facilitated", "Contributed", "Engaged", "Liaised", "Consulted", "Integrated", "Aligned", "Coordinated")),
    ("analysis", ("Analyzed", "Evaluated", "Assessed", "Investigated", "Researched", "Diagnosed", "Identified", "Discovered", "Audited", "Reviewed")),
    ("delivery", ("Delivered", "Launched", "Deployed", "Released", "Shipped", "Executed", "Completed", "Published", "Migrated", "Transitioned")),
)

ACHIEVEMENT_TEMPLATES = (
    "{verb} {technology} application serving {metric} users, achieving {outcome}% uptime",
    "{verb} system performance by {metric}% through {technology} optimization and caching strategies",
    "{verb} with cross-functional teams of {metric} engineers to deliver features on schedule",
    "{verb} and maintained {metric}+ RESTful APIs using {technology}, reducing response time by {outcome}%",
    "{verb} CI/CD pipelines using {technology}, reducing deployment time from hours to {metric} minutes",
    "{verb} comprehensive test suites achieving {metric}% code coverage using {technology}",
    "{verb} database queries resulting in {metric}% improvement in data retrieval performance",
    "{verb} microservices architecture handling {metric}+ requests per second using {technology}",
    "{verb} responsive UI components using {technology}, improving user engagement by {metric}%",
    "{verb} authentication and authorization system using {technology}, securing {metric}+ user accounts",
    "{verb} automated data pipeline processing {metric}+ records daily using {technology}",
    "{verb} team of {metric} developers, conducting code reviews and establishing coding standards",
    "{verb} legacy monolith into {metric} microservices, reducing deployment failures by {outcome}%",
    "{verb} real-time notification system using {technology}, delivering {metric}+ messages daily",
    "{verb} cloud infrastructure on {technology}, reducing operational costs by {metric}%",
    "{verb} A/B testing framework that increased conversion rates by {metric}%",
    "{verb} documentation and onboarding materials reducing new developer ramp-up time by {metric}%",
    "{verb} monitoring and alerting system using {technology}, reducing incident response time by {metric}%",
)

COMPANY_NAMES = {
    "tech": ("TechNova Solutions", "CloudBridge Systems", "DataPulse Inc.", "InnovateTech Corp", "DigitalEdge Labs", "NexGen Software", "CyberVault Technologies"),
    "finance": ("FinServe Global", "CapitalStream Technologies", "SecureBank Systems", "PayBridge Solutions", "WealthTech Partners"),
    "healthcare": ("HealthSync Technologies", "MedConnect Systems", "CarePoint Digital", "BioTech Innovations", "HealthBridge Solutions"),
    "ecommerce": ("ShopWave Technologies", "RetailStack Inc.", "CartGenius Solutions", "MarketPulse Digital", "CommercePro Systems"),
    "general": ("Vertex Solutions", "Pinnacle Technologies", "Summit Digital", "Horizon Systems", "Catalyst Corp", "Ascend Technologies", "Vanguard Software"),
}

EDUCATION_TEMPLATES = (
    EducationTemplate(
        school="Georgia Institute of Technology",
        degree="Bachelor of Science",
        fields=("Computer Science", "Software Engineering", "Information Technology"),
        descriptions=(
            "Dean's List, GPA: 3.8/4.0",
            "Relevant coursework: Data Structures, Algorithms, Software Engineering, Database Systems",
        ),
    ),
    EducationTemplate(
        school="University of California, Berkeley",
        degree="Master of Science",
        fields=("Computer Science", "Data Science", "Artificial Intelligence"),
        descriptions=(
            "Graduate Research Assistant",
            "Thesis: Scalable Distributed Systems for Real-Time Data Processing",
        ),
    ),
    EducationTemplate(
        school="University of Texas at Austin",
        degree="Bachelor of Science",
        fields=("Computer Engineering", "Electrical Engineering", "Computer Science"),
        descriptions=(
            "Magna Cum Laude, GPA: 3.7/4.0",
            "Senior Capstone: Full-Stack Web Application for Campus Services",
        ),
    ),
    EducationTemplate(
        school="Carnegie Mellon University",
        degree="Master of Science",
        fields=("Software Engineering", "Information Systems", "Human-Computer Interaction"),
        descriptions=(
            "Teaching Assistant for Software Architecture",
            "Published research on microservices patterns",
        ),
    ),
    EducationTemplate(
        school="University of Michigan",
        degree="Bachelor of Science",
        fields=("Information Science", "Computer Science", "Data Analytics"),
        descriptions=(
            "Dean's List, Honors Program",
            "Relevant coursework: Machine Learning, Cloud Computing, Cybersecurity",
        ),
    ),
)

JOB_TITLE_MAP = {
    "frontend": ("Frontend Developer", "UI Engineer", "Frontend Software Engineer", "Web Developer"),
    "backend": ("Backend Developer", "Software Engineer", "Backend Engineer", "API Developer"),
    "fullstack": ("Full Stack Developer", "Software Engineer", "Full Stack Engineer", "Web Application Developer"),
    "devops": ("DevOps Engineer", "Site Reliability Engineer", "Platform Engineer", "Infrastructure Engineer"),
    "data": ("Data Engineer", "Data Analyst", "Data Scientist", "Analytics Engineer"),
    "mobile": ("Mobile Developer", "iOS Developer", "Android Developer", "Mobile Engineer"),
    "security": ("Security Engineer", "Application Security Engineer", "Cybersecurity Analyst", "Security Consultant"),
    "cloud": ("Cloud Engineer", "Cloud Architect", "Solutions Architect", "Cloud Infrastructure Engineer"),
    "qa": ("QA Engineer", "Test Automation Engineer", "Quality Engineer", "SDET"),
    "management": ("Engineering Manager", "Technical Lead", "Team Lead", "Development Manager"),
    "design": ("UX Designer", "UI/UX Designer", "Product Designer", "Design Engineer"),
    "general": ("Software Developer", "Software Engineer", "Application Developer", "Technology Consultant"),
}

SUMMARY_TEMPLATES = (
    "Results-driven {title} with {years} years of experience in {domains}. Proven track record of delivering high-quality {specialty} solutions that drive business growth. Passionate about {passion} and committed to writing clean, maintainable code.",
    "Accomplished {title} with {years}+ years of expertise in {domains}. Skilled at translating complex business requirements into scalable technical solutions. Strong advocate for {passion} and continuous improvement.",
    "Detail-oriented {title} with {years} years of hands-on experience building {specialty} applications. Adept at working in fast-paced agile environments and collaborating with cross-functional teams. Focused on {passion} and delivering exceptional user experiences.",
    "Innovative {title} bringing {years} years of professional experience in {domains}. Demonstrated ability to architect and implement robust {specialty} systems. Committed to {passion} and staying current with emerging technologies.",
)

SPECIALTY_MAP = {
    "fullstack": "full-stack web",
    "frontend": "frontend",
    "backend": "backend",
    "data": "data-driven",
    "mobile": "mobile",
    "devops": "cloud infrastructure",
    "cloud": "cloud-native",
    "security": "secure",
    "qa": "quality-focused",
}

PASSIONS = (
    "best practices and clean architecture",
    "developer experience and code quality",
    "scalable systems and performance optimization",
    "user-centric design and accessibility",
    "automation and continuous delivery",
    "mentoring junior developers and knowledge sharing",
)

FIRST_NAMES = (
    "Alex", "Jordan", "Morgan", "Taylor", "Casey", "Riley", "Avery", "Cameron",
    "Quinn", "Sage", "Reese", "Blake", "Skyler", "Dakota", "Emery",
)
LAST_NAMES = (
    "Anderson", "Martinez", "Thompson", "Nakamura", "Patel", "Rodriguez", "Chen",
    "Williams", "Kim", "Johnson", "Singh", "Park", "Mitchell", "Rivera", "Bennett",
)

LOCATIONS = (
    "San Francisco, CA", "New York, NY", "Austin, TX", "Seattle, WA",
    "Denver, CO", "Chicago, IL", "Boston, MA", "Portland, OR",
    "Atlanta, GA", "Raleigh, NC", "San Diego, CA", "Minneapolis, MN",
)

METRICS = {
    "users": ("10K", "50K", "100K", "500K", "1M", "2M"),
    "percentage": ("15", "20", "25", "30", "35", "40", "45", "50", "60"),
    "team_size": ("3", "4", "5", "6", "8", "10", "12"),
    "count": ("5", "10", "15", "20", "25", "30", "50"),
    "time": ("5", "10", "15", "20", "30"),
}


class KnowledgeBase(FrozenModel):
    """Bundle of every reference table, passed into the analyzer and assembler."""
    skill_categories: tuple[SkillCategory, ...] = SKILL_CATEGORIES
    seniority_patterns: tuple[SeniorityPattern, ...] = SENIORITY_PATTERNS
    domain_keywords: tuple[tuple[str, tuple[str, ...]], ...] = DOMAIN_KEYWORDS
    industry_keywords: tuple[tuple[str, tuple[str, ...]], ...] = INDUSTRY_KEYWORDS
    technology_patterns: tuple[str, ...] = TECHNOLOGY_PATTERNS
    title_patterns: tuple[TitlePattern, ...] = TITLE_PATTERNS
    stop_words: frozenset[str] = STOP_WORDS
    action_verbs: tuple[tuple[str, tuple[str, ...]], ...] = ACTION_VERBS
    achievement_templates: tuple[str, ...] = ACHIEVEMENT_TEMPLATES
    company_names: Mapping[str, tuple[str, ...]] = Field(default_factory=lambda: MappingProxyType(dict(COMPANY_NAMES)))
    education_templates: tuple[EducationTemplate, ...] = EDUCATION_TEMPLATES
    job_title_map: Mapping[str, tuple[str, ...]] = Field(default_factory=lambda: MappingProxyType(dict(JOB_TITLE_MAP)))
    summary_templates: tuple[str, ...] = SUMMARY_TEMPLATES
    specialty_map: Mapping[str, str] = Field(default_factory=lambda: MappingProxyType(dict(SPECIALTY_MAP)))
    passions: tuple[str, ...] = PASSIONS
    first_names: tuple[str, ...] = FIRST_NAMES
    last_names: tuple[str, ...] = LAST_NAMES
    locations: tuple[str, ...] = LOCATIONS
    metrics: Mapping[str, tuple[str, ...]] = Field(default_factory=lambda: MappingProxyType(dict(METRICS)))

    @field_validator("company_names", "job_title_map", "specialty_map", "metrics", mode="after")
    @classmethod
    def _read_only(cls, value):
        return MappingProxyType(dict(value))


_knowledge_base: KnowledgeBase | None = None


def load_knowledge_base() -> KnowledgeBase:
    global _knowledge_base
    if _knowledge_base is None:
        _knowledge_base = KnowledgeBase()
    return _knowledge_base
