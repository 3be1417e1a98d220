"""Sample catalog used by the seeding tools.

Five technology roles, each with at least three learning resources.
Resources reference their role by name; ids are assigned on insert.
"""

SAMPLE_ROLES = [
    {
        "name": "Software Engineer",
        "short_description": "Design, develop, and maintain software applications and systems.",
        "long_description": (
            "Software Engineers are the architects of the digital world. They write code to create "
            "applications, websites, and systems that solve real-world problems. This role involves "
            "designing software solutions, writing clean and efficient code, debugging issues, and "
            "collaborating with teams to bring ideas to life."
        ),
        "responsibilities": [
            "Write clean, maintainable code in various programming languages",
            "Design and implement software features and functionality",
            "Debug and fix software issues",
            "Collaborate with product managers and designers",
            "Participate in code reviews and testing",
            "Document code and technical processes",
        ],
        "skills": [
            "Programming languages (Python, JavaScript, Java, etc.)",
            "Problem-solving and algorithmic thinking",
            "Version control (Git)",
            "Software design patterns",
            "Testing and debugging",
            "Communication and teamwork",
        ],
    },
    {
        "name": "QA Engineer",
        "short_description": "Ensure software quality through testing and quality assurance processes.",
        "long_description": (
            "Quality Assurance Engineers are the guardians of software quality. They design and execute "
            "tests to find bugs before users do, ensuring that applications work correctly and provide a "
            "great user experience. QA Engineers think critically about how software might fail and create "
            "comprehensive test plans to catch issues early."
        ),
        "responsibilities": [
            "Design and execute test plans and test cases",
            "Identify, document, and track software defects",
            "Perform manual and automated testing",
            "Verify bug fixes and feature implementations",
            "Collaborate with developers to improve quality",
            "Maintain testing documentation and reports",
        ],
        "skills": [
            "Testing methodologies and best practices",
            "Test automation tools (Selenium, Cypress)",
            "Attention to detail",
            "Analytical thinking",
            "Bug tracking systems (Jira)",
            "Basic programming knowledge",
        ],
    },
    {
        "name": "Data Scientist",
        "short_description": "Analyze complex data to extract insights and build predictive models.",
        "long_description": (
            "Data Scientists are modern-day detectives who uncover patterns and insights hidden in data. "
            "They use statistics, machine learning, and programming to analyze large datasets, build "
            "predictive models, and help organizations make data-driven decisions. This role combines "
            "mathematics, programming, and business understanding."
        ),
        "responsibilities": [
            "Collect, clean, and analyze large datasets",
            "Build and train machine learning models",
            "Create data visualizations and reports",
            "Communicate findings to stakeholders",
            "Develop data pipelines and workflows",
            "Stay current with ML/AI advancements",
        ],
        "skills": [
            "Python and data science libraries (pandas, scikit-learn)",
            "Statistics and probability",
            "Machine learning algorithms",
            "Data visualization (Matplotlib, Tableau)",
            "SQL and database querying",
            "Critical thinking and communication",
        ],
    },
    {
        "name": "UX/UI Designer",
        "short_description": "Create intuitive and visually appealing user interfaces and experiences.",
        "long_description": (
            "UX/UI Designers are the artists and psychologists of the tech world. They research how users "
            "interact with products, design intuitive interfaces, and create beautiful visual designs that "
            "make technology accessible and enjoyable. This role requires both creative and analytical "
            "thinking to balance aesthetics with usability."
        ),
        "responsibilities": [
            "Conduct user research and usability testing",
            "Create wireframes, mockups, and prototypes",
            "Design user interfaces and visual elements",
            "Develop design systems and style guides",
            "Collaborate with developers and product teams",
            "Iterate designs based on user feedback",
        ],
        "skills": [
            "Design tools (Figma, Sketch, Adobe XD)",
            "User research methodologies",
            "Visual design principles",
            "Prototyping and wireframing",
            "HTML/CSS basics",
            "Empathy and user-centered thinking",
        ],
    },
    {
        "name": "DevOps Engineer",
        "short_description": "Automate and optimize software deployment and infrastructure management.",
        "long_description": (
            "DevOps Engineers are the bridge between development and operations. They automate deployment "
            "processes, manage cloud infrastructure, and ensure that applications run reliably and "
            "efficiently in production. This role combines software development skills with system "
            "administration knowledge to create seamless deployment pipelines."
        ),
        "responsibilities": [
            "Build and maintain CI/CD pipelines",
            "Manage cloud infrastructure (AWS, Azure, GCP)",
            "Automate deployment and scaling processes",
            "Monitor system performance and reliability",
            "Implement security best practices",
            "Troubleshoot production issues",
        ],
        "skills": [
            "Cloud platforms (AWS, Azure, GCP)",
            "Containerization (Docker, Kubernetes)",
            "CI/CD tools (Jenkins, GitHub Actions)",
            "Scripting (Bash, Python)",
            "Infrastructure as Code (Terraform)",
            "System administration and networking",
        ],
    },
]

# (role name, title, url, resource type, difficulty)
SAMPLE_RESOURCES = [
    ("Software Engineer", "CS50: Introduction to Computer Science", "https://cs50.harvard.edu/", "Course", "Beginner"),
    ("Software Engineer", "freeCodeCamp: Learn to Code", "https://www.freecodecamp.org/", "Course", "Beginner"),
    ("Software Engineer", "The Odin Project", "https://www.theodinproject.com/", "Course", "Intermediate"),
    ("Software Engineer", "Clean Code by Robert Martin",
     "https://www.amazon.com/Clean-Code-Handbook-Software-Craftsmanship/dp/0132350882", "Article", "Intermediate"),

    ("QA Engineer", "Software Testing Tutorial", "https://www.guru99.com/software-testing.html", "Article", "Beginner"),
    ("QA Engineer", "Test Automation University", "https://testautomationu.applitools.com/", "Course", "Intermediate"),
    ("QA Engineer", "Introduction to Selenium", "https://www.selenium.dev/documentation/", "Article", "Intermediate"),
    ("QA Engineer", "Cypress Testing Tutorial", "https://www.youtube.com/watch?v=u8vMu7viCm8", "Video", "Intermediate"),

    ("Data Scientist", "Python for Data Science",
     "https://www.coursera.org/learn/python-for-applied-data-science-ai", "Course", "Beginner"),
    ("Data Scientist", "Introduction to Machine Learning", "https://www.youtube.com/watch?v=ukzFI9rgwfU", "Video", "Beginner"),
    ("Data Scientist", "Kaggle Learn", "https://www.kaggle.com/learn", "Course", "Intermediate"),
    ("Data Scientist", "Deep Learning Specialization",
     "https://www.coursera.org/specializations/deep-learning", "Course", "Advanced"),

    ("UX/UI Designer", "Google UX Design Certificate",
     "https://www.coursera.org/professional-certificates/google-ux-design", "Course", "Beginner"),
    ("UX/UI Designer", "Laws of UX", "https://lawsofux.com/", "Article", "Beginner"),
    ("UX/UI Designer", "Figma Tutorial for Beginners", "https://www.youtube.com/watch?v=FTFaQWZBqQ8", "Video", "Beginner"),
    ("UX/UI Designer", "Nielsen Norman Group Articles", "https://www.nngroup.com/articles/", "Article", "Intermediate"),

    ("DevOps Engineer", "Docker Tutorial for Beginners", "https://www.youtube.com/watch?v=fqMOX6JJhGo", "Video", "Beginner"),
    ("DevOps Engineer", "AWS Cloud Practitioner Essentials",
     "https://aws.amazon.com/training/digital/aws-cloud-practitioner-essentials/", "Course", "Beginner"),
    ("DevOps Engineer", "Kubernetes Documentation", "https://kubernetes.io/docs/home/", "Article", "Intermediate"),
    ("DevOps Engineer", "CI/CD Pipeline Tutorial", "https://www.youtube.com/watch?v=scEDHsr3APg", "Video", "Intermediate"),
]
