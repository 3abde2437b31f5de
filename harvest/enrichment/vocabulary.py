"""
Controlled skill vocabulary.

SKILLS holds the canonical spelling of every skill the annotator can emit.
Entries repeat across groups on purpose (a tool belongs to several roles);
lookup is case-insensitive and the first spelling wins.

SKILL_ALIASES folds common spelling and punctuation variants into one or more
canonical names. Keys are lower-case phrases matched on word boundaries.
"""

from typing import Dict, Tuple

ENGINEERING = (
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Rust", "Go",
    "Kotlin", "Swift", "Objective-C", "Dart", "Scala", "Ruby", "PHP", "Perl",
    "HTML", "CSS", "Sass", "Tailwind CSS", "Bootstrap",
    "React", "Vue.js", "Angular", "Next.js", "Redux", "jQuery", "Svelte",
    "Node.js", "Express.js", "NestJS", "Django", "Flask", "FastAPI",
    "Spring Boot", "Hibernate", ".NET", "ASP.NET", "Ruby on Rails", "Laravel",
    "REST APIs", "GraphQL", "gRPC", "Microservices", "WebSockets",
    "MySQL", "PostgreSQL", "MongoDB", "Redis", "Cassandra", "DynamoDB",
    "Elasticsearch", "SQLite", "Oracle Database", "SQL", "NoSQL",
    "Kafka", "RabbitMQ",
    "Git", "GitHub", "GitLab", "Bitbucket", "CI/CD", "Jenkins",
    "GitHub Actions", "Version Control",
    "AWS", "Azure", "Google Cloud", "GCP", "Docker", "Kubernetes",
    "Unit Testing", "Jest", "Mocha", "JUnit", "Debugging",
    "Object-Oriented Programming (OOP)", "Data Structures", "Algorithms",
    "System Design", "Design Patterns", "Clean Code", "MVC",
    "Agile", "Scrum", "Kanban", "JIRA", "Trello",
)

DATA_SCIENCE = (
    "Pandas", "NumPy", "Matplotlib", "Seaborn", "Scikit-learn", "TensorFlow",
    "Keras", "PyTorch", "XGBoost", "LightGBM", "OpenCV",
    "Hugging Face Transformers", "StatsModels", "Jupyter Notebooks",
    "Google Colab", "BigQuery", "Snowflake", "Databricks", "Spark", "Hadoop",
    "Airflow", "MLflow", "AWS Sagemaker", "Azure ML Studio", "Data Wrangling",
    "Feature Engineering", "Model Evaluation", "A/B Testing",
    "Probability & Statistics", "Linear Algebra", "Optimization Algorithms",
    "Natural Language Processing (NLP)", "Computer Vision",
    "Time Series Forecasting", "Clustering Algorithms", "Regression Models",
    "Classification Models", "Machine Learning", "Deep Learning",
    "Reinforcement Learning", "Generative AI", "Large Language Models (LLM)",
    "Prompt Engineering", "LangChain", "MLOps", "Data Analysis",
    "Data Engineering", "ETL", "Data Visualization", "Power BI", "Tableau",
    "Looker", "Excel",
)

DEVOPS = (
    "Linux", "Shell Scripting", "Bash", "CI/CD Pipelines", "GitLab CI", "Helm",
    "Terraform", "Ansible", "Puppet", "Chef", "CloudFormation", "Prometheus",
    "Grafana", "Datadog", "New Relic",
    "ELK Stack (Elasticsearch, Logstash, Kibana)", "Splunk", "Nagios",
    "Incident Management", "On-call Rotation", "Load Balancing",
    "High Availability (HA)", "Disaster Recovery", "Monitoring & Alerting",
    "Infrastructure as Code (IaC)", "Configuration Management",
    "System Architecture", "Network Security", "SSL/TLS", "DNS Management",
    "Service Mesh", "Istio", "SRE Principles", "SLIs / SLOs / SLAs",
    "Blue-Green Deployment", "Canary Releases", "Log Aggregation", "Nginx",
)

SECURITY = (
    "Firewalls", "IDS/IPS", "SIEM", "Penetration Testing",
    "Vulnerability Assessment", "Nmap", "Wireshark", "Burp Suite",
    "Metasploit", "Kali Linux", "SOC Monitoring", "Incident Response",
    "Threat Hunting", "Malware Analysis", "Reverse Engineering",
    "Cryptography", "Secure Coding", "OWASP Top 10",
    "Web Application Security", "Endpoint Security", "Mobile Security",
    "Cloud Security", "Zero Trust Architecture",
    "IAM (Identity & Access Management)", "OAuth", "SAML", "JWT",
    "DevSecOps", "Security Auditing", "Forensics", "Log Analysis",
    "Data Loss Prevention (DLP)", "ISO 27001", "NIST Framework",
    "Risk Management", "Security Compliance", "Cyber Threat Intelligence",
    "Phishing Simulation", "Security Awareness Training",
)

QUALITY = (
    "Manual Testing", "Automation Testing", "Selenium", "Playwright", "Cypress",
    "Appium", "TestNG", "Postman", "API Testing", "UI Testing",
    "Mobile Testing", "Performance Testing", "Load Testing", "JMeter", "K6",
    "Security Testing", "Cross-Browser Testing", "Regression Testing",
    "Smoke Testing", "Sanity Testing", "Integration Testing", "System Testing",
    "End-to-End Testing", "Bug Tracking", "TestRail", "Test Case Design",
    "Test Planning", "BDD (Cucumber / Gherkin)", "TDD", "Database Testing",
    "Mocking Tools",
)

MOBILE = (
    "Android SDK", "iOS SDK", "Flutter", "React Native", "SwiftUI",
    "Jetpack Compose", "Xcode", "Android Studio", "Expo", "MVVM",
    "Clean Architecture", "Dependency Injection", "Espresso", "Mockito",
    "XCTest", "Firebase", "Crashlytics", "Supabase", "Socket.IO",
)

WEB3 = (
    "Solidity", "Vyper", "Ethereum", "Polygon", "Solana", "Smart Contract Development",
    "Smart Contract Auditing", "Hardhat", "Truffle", "Foundry", "OpenZeppelin",
    "Web3.js", "Ethers.js", "IPFS", "Tokenomics", "Chainlink",
    "Layer 2 Scaling", "Blockchain",
)

EMBEDDED = (
    "Embedded C", "Assembly Language", "ARM Cortex", "RISC-V", "Raspberry Pi",
    "Arduino", "ESP32", "STM32", "FreeRTOS", "Zephyr RTOS", "VxWorks",
    "Bare-Metal Programming", "Bootloaders", "Firmware Development",
    "Interrupt Handling", "Device Drivers", "UART", "SPI", "I2C", "CAN Bus",
    "Modbus", "Bluetooth", "Zigbee", "LoRa", "MQTT", "USB",
    "Digital Electronics", "Analog Electronics", "Circuit Design",
    "PCB Design", "Schematic Capture", "Signal Conditioning",
    "Power Management", "JTAG", "Logic Analyzer", "GDB Debugging",
    "Altium Designer", "KiCad", "MATLAB/Simulink", "Verilog", "VHDL", "FPGA",
)

PRODUCT_DESIGN = (
    "Product Strategy", "Roadmapping", "User Research", "Wireframing",
    "Market Research", "Agile Methodology", "Feature Prioritization",
    "MVP Definition", "User Stories", "OKRs / KPIs", "Stakeholder Management",
    "Product Lifecycle Management", "Go-to-Market Strategy",
    "User Onboarding Optimization", "Conversion Rate Optimization (CRO)",
    "Customer Journey Mapping", "Notion", "Product Analytics",
    "User Interface (UI)", "User Experience (UX)", "Design Systems",
    "Interaction Design", "Information Architecture", "Accessibility (WCAG)",
    "Responsive Design", "Mobile-First Design", "Prototyping", "Figma",
    "Adobe XD", "Sketch", "Framer", "Webflow", "InVision", "Zeplin",
    "Illustrator", "Photoshop", "Lottie", "Heuristic Evaluation",
    "Usability Testing", "Persona Development", "Design Thinking",
    "Card Sorting",
)

MARKETING = (
    "Performance Marketing", "Google Ads", "Meta Ads", "LinkedIn Ads",
    "Programmatic Advertising", "Remarketing", "Landing Page Optimization",
    "Campaign Management", "Content Marketing", "SEO", "Technical SEO",
    "Keyword Research", "Content Writing", "Copywriting", "Email Marketing",
    "Marketing Automation", "Social Media Strategy", "Influencer Marketing",
    "Brand Positioning", "Community Building", "Video Marketing",
    "Growth Loops", "Referral Programs", "Retention Marketing",
    "Lifecycle Marketing", "App Store Optimization (ASO)", "Pricing Strategy",
    "Google Analytics", "GA4", "Mixpanel", "Amplitude", "Funnel Analysis",
    "Attribution Modeling", "Budget Planning", "Cohort Analysis",
    "Customer Segmentation",
)

SALES = (
    "Lead Generation", "Cold Calling", "Cold Emailing", "Prospecting",
    "Inbound Sales", "Outbound Sales", "Consultative Selling",
    "Solution Selling", "Account Management",
    "Client Relationship Management", "Sales Negotiation",
    "Objection Handling", "B2B Sales", "B2C Sales", "Channel Sales",
    "Partnership Development", "Customer Retention", "Proposal Writing",
    "RFP Handling", "Territory Management", "Pipeline Management",
    "Salesforce", "HubSpot", "Zoho CRM", "Pipedrive", "Apollo.io",
    "LinkedIn Sales Navigator", "Google Workspace", "Sales Analytics",
)

OPERATIONS = (
    "Process Optimization", "Business Process Mapping", "SOP Development",
    "Project Management", "Inventory Management", "Vendor Management",
    "Procurement", "Supply Chain Management", "Logistics Coordination",
    "Order Fulfillment", "Demand Forecasting", "Workforce Planning",
    "Capacity Planning", "Cost Reduction", "Compliance Management",
    "KPI Tracking", "Budgeting & Forecasting", "Revenue Operations (RevOps)",
    "Airtable", "Asana", "ClickUp", "Slack", "Zapier", "Monday.com", "SAP",
    "Oracle NetSuite", "ERP Systems", "CRM Tools",
)

FINANCE_LEGAL = (
    "Financial Analysis", "Financial Modelling",
    "Accounting Principles (GAAP/IFRS)", "Cash Flow Management", "Bookkeeping",
    "Auditing", "Tax Planning", "Cost Accounting", "Variance Analysis",
    "Revenue Recognition", "Accounts Payable", "Accounts Receivable",
    "Treasury Management", "Mergers & Acquisitions (M&A)", "Investor Relations",
    "Valuation", "Financial Reporting", "Unit Economics", "Legal Research",
    "Contract Drafting", "Contract Review", "Corporate Law",
    "Intellectual Property (IP)", "Legal Compliance", "Data Privacy",
    "GDPR", "Due Diligence", "Litigation Support", "Regulatory Compliance",
    "Tally", "Zoho Books", "QuickBooks", "Xero", "DocuSign", "GST",
)

PEOPLE = (
    "Talent Acquisition", "Recruitment Strategy", "Sourcing", "Interviewing",
    "Onboarding", "Employee Engagement", "HR Operations",
    "Compensation & Benefits", "Payroll Management", "Performance Management",
    "Employee Relations", "Conflict Resolution", "Labor Law Compliance",
    "Succession Planning", "Organizational Development (OD)",
    "Learning & Development (L&D)", "HR Analytics",
    "Diversity, Equity & Inclusion (DEI)", "Employer Branding",
    "HR Business Partnering", "LinkedIn Recruiter", "Workday", "BambooHR",
    "Keka", "Darwinbox", "SAP SuccessFactors", "Greenhouse", "Lever",
    "HRIS", "ATS",
)

SUPPORT = (
    "Customer Support", "Technical Support", "Product Troubleshooting",
    "Ticket Management", "Helpdesk Operations", "Customer Onboarding",
    "Escalation Management", "Knowledge Base Management", "Live Chat Support",
    "Email Support", "CRM Management", "Churn Analysis",
    "Customer Success Management", "Voice of Customer (VoC)", "Zendesk",
    "Freshdesk", "Zoho Desk", "Intercom", "Salesforce Service Cloud",
    "SurveyMonkey", "Typeform",
)

SOFT_SKILLS = (
    "Communication", "Teamwork", "Problem Solving", "Leadership",
    "Critical Thinking", "Time Management", "Attention to Detail",
    "Stakeholder Communication", "Cross-Functional Collaboration",
    "Storytelling", "Creativity", "Strategic Thinking", "Decision-Making",
    "Mentoring", "Presentation Skills", "Negotiation",
)

SKILLS: Tuple[str, ...] = (
    ENGINEERING
    + DATA_SCIENCE
    + DEVOPS
    + SECURITY
    + QUALITY
    + MOBILE
    + WEB3
    + EMBEDDED
    + PRODUCT_DESIGN
    + MARKETING
    + SALES
    + OPERATIONS
    + FINANCE_LEGAL
    + PEOPLE
    + SUPPORT
    + SOFT_SKILLS
)

SKILL_ALIASES: Dict[str, Tuple[str, ...]] = {
    "ui/ux": ("User Interface (UI)", "User Experience (UX)"),
    "ux/ui": ("User Interface (UI)", "User Experience (UX)"),
    "ui ux": ("User Interface (UI)", "User Experience (UX)"),
    "ui": ("User Interface (UI)",),
    "ux": ("User Experience (UX)",),
    "golang": ("Go",),
    "go language": ("Go",),
    "go lang": ("Go",),
    "nodejs": ("Node.js",),
    "node js": ("Node.js",),
    "reactjs": ("React",),
    "react.js": ("React",),
    "react js": ("React",),
    "vuejs": ("Vue.js",),
    "vue": ("Vue.js",),
    "angularjs": ("Angular",),
    "nextjs": ("Next.js",),
    "expressjs": ("Express.js",),
    "js": ("JavaScript",),
    "es6": ("JavaScript",),
    "c plus plus": ("C++",),
    "csharp": ("C#",),
    "dotnet": (".NET",),
    "dot net": (".NET",),
    "postgres": ("PostgreSQL",),
    "postgresql": ("PostgreSQL",),
    "mongo": ("MongoDB",),
    "k8s": ("Kubernetes",),
    "amazon web services": ("AWS",),
    "google cloud platform": ("GCP",),
    "microsoft azure": ("Azure",),
    "rest api": ("REST APIs",),
    "restful": ("REST APIs",),
    "restful apis": ("REST APIs",),
    "ci cd": ("CI/CD",),
    "ci/cd pipeline": ("CI/CD Pipelines",),
    "oop": ("Object-Oriented Programming (OOP)",),
    "oops": ("Object-Oriented Programming (OOP)",),
    "object oriented programming": ("Object-Oriented Programming (OOP)",),
    "dsa": ("Data Structures", "Algorithms"),
    "data structures and algorithms": ("Data Structures", "Algorithms"),
    "ml": ("Machine Learning",),
    "nlp": ("Natural Language Processing (NLP)",),
    "llm": ("Large Language Models (LLM)",),
    "llms": ("Large Language Models (LLM)",),
    "genai": ("Generative AI",),
    "gen ai": ("Generative AI",),
    "sklearn": ("Scikit-learn",),
    "scikit learn": ("Scikit-learn",),
    "huggingface": ("Hugging Face Transformers",),
    "hugging face": ("Hugging Face Transformers",),
    "powerbi": ("Power BI",),
    "ms excel": ("Excel",),
    "microsoft excel": ("Excel",),
    "advanced excel": ("Excel",),
    "google sheets": ("Excel",),
    "shell script": ("Shell Scripting",),
    "iac": ("Infrastructure as Code (IaC)",),
    "elk": ("ELK Stack (Elasticsearch, Logstash, Kibana)",),
    "ssl": ("SSL/TLS",),
    "tls": ("SSL/TLS",),
    "owasp": ("OWASP Top 10",),
    "iam": ("IAM (Identity & Access Management)",),
    "oauth2": ("OAuth",),
    "oauth 2.0": ("OAuth",),
    "json web token": ("JWT",),
    "dlp": ("Data Loss Prevention (DLP)",),
    "pen testing": ("Penetration Testing",),
    "pentesting": ("Penetration Testing",),
    "vapt": ("Penetration Testing", "Vulnerability Assessment"),
    "e2e testing": ("End-to-End Testing",),
    "end to end testing": ("End-to-End Testing",),
    "cucumber": ("BDD (Cucumber / Gherkin)",),
    "bdd": ("BDD (Cucumber / Gherkin)",),
    "test driven development": ("TDD",),
    "jmeter": ("JMeter",),
    "android": ("Android SDK",),
    "ios": ("iOS SDK",),
    "dagger": ("Dependency Injection",),
    "hilt": ("Dependency Injection",),
    "web3": ("Web3.js",),
    "smart contracts": ("Smart Contract Development",),
    "rtos": ("FreeRTOS",),
    "matlab": ("MATLAB/Simulink",),
    "simulink": ("MATLAB/Simulink",),
    "ux research": ("User Research",),
    "wcag": ("Accessibility (WCAG)",),
    "cro": ("Conversion Rate Optimization (CRO)",),
    "aso": ("App Store Optimization (ASO)",),
    "search engine optimization": ("SEO",),
    "google analytics 4": ("GA4",),
    "facebook ads": ("Meta Ads",),
    "retargeting": ("Remarketing",),
    "gtm strategy": ("Go-to-Market Strategy",),
    "go to market": ("Go-to-Market Strategy",),
    "okrs": ("OKRs / KPIs",),
    "kpis": ("OKRs / KPIs",),
    "plm": ("Product Lifecycle Management",),
    "revops": ("Revenue Operations (RevOps)",),
    "supply chain": ("Supply Chain Management",),
    "erp": ("ERP Systems",),
    "crm": ("CRM Tools",),
    "netsuite": ("Oracle NetSuite",),
    "financial modeling": ("Financial Modelling",),
    "gaap": ("Accounting Principles (GAAP/IFRS)",),
    "ifrs": ("Accounting Principles (GAAP/IFRS)",),
    "m&a": ("Mergers & Acquisitions (M&A)",),
    "tally erp": ("Tally",),
    "ccpa": ("Data Privacy",),
    "recruitment": ("Talent Acquisition",),
    "recruiting": ("Talent Acquisition",),
    "payroll": ("Payroll Management",),
    "l&d": ("Learning & Development (L&D)",),
    "dei": ("Diversity, Equity & Inclusion (DEI)",),
    "hrbp": ("HR Business Partnering",),
    "applicant tracking system": ("ATS",),
    "customer success": ("Customer Success Management",),
    "voc": ("Voice of Customer (VoC)",),
    "team player": ("Teamwork",),
    "problem-solving": ("Problem Solving",),
    "communication skills": ("Communication",),
    "verbal and written communication": ("Communication",),
}
