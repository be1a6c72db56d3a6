"""Static curriculum tables: board syllabi, exam tracks, technology tracks and roadmap.sh stage roadmaps."""

from __future__ import annotations


def _unit(title: str, description: str, topics: list[str], hours: float, order: int) -> dict:
    return {
        "title": title,
        "description": description,
        "topics": topics,
        "estimated_duration": hours,
        "order": order,
    }


# ── Board / exam / technology presets (subject -> unit -> topic trees) ──────

SYLLABUS_PRESETS: dict[str, dict] = {
    "cbse-9": {
        "title": "CBSE Class 9 Complete Syllabus Plan",
        "description": "Comprehensive day-wise study plan covering all subjects for CBSE Class 9",
        "subjects": [
            {"name": "Mathematics", "description": "Advanced mathematical concepts and problem-solving", "weightage": 25, "total_hours": 95, "units": [
                _unit("Number Systems", "Real numbers, rational and irrational numbers", [
                    "Real Numbers", "Rational Numbers", "Irrational Numbers", "Decimal Expansions",
                    "Operations on Real Numbers"], 20, 1),
                _unit("Algebra", "Polynomials, linear equations, and quadratic equations", [
                    "Polynomials", "Linear Equations in Two Variables", "Quadratic Equations",
                    "Arithmetic Progressions"], 30, 2),
                _unit("Geometry", "Coordinate geometry and geometric constructions", [
                    "Coordinate Geometry", "Lines and Angles", "Triangles", "Circles", "Constructions"], 25, 3),
                _unit("Mensuration", "Areas and volumes of geometric figures", [
                    "Areas of Parallelograms and Triangles", "Surface Areas and Volumes", "Statistics"], 20, 4),
            ]},
            {"name": "Science", "description": "Physics, Chemistry, and Biology fundamentals", "weightage": 25, "total_hours": 105, "units": [
                _unit("Matter - Its Nature and Behaviour", "Physical and chemical properties of matter", [
                    "Matter in Our Surroundings", "Is Matter Around Us Pure", "Atoms and Molecules",
                    "Structure of the Atom"], 25, 1),
                _unit("Organisation in the Living World", "Cell biology and living organisms", [
                    "The Fundamental Unit of Life", "Tissues", "Diversity in Living Organisms",
                    "Why Do We Fall Ill"], 30, 2),
                _unit("Motion, Force and Work", "Physics concepts and laws", [
                    "Motion", "Force and Laws of Motion", "Gravitation", "Work and Energy", "Sound"], 35, 3),
                _unit("Our Environment", "Environmental science and natural resources", [
                    "Natural Resources", "Improvement in Food Resources"], 15, 4),
            ]},
            {"name": "English", "description": "Language skills, literature, and communication", "weightage": 20, "total_hours": 85, "units": [
                _unit("Reading Comprehension", "Understanding and analyzing texts", [
                    "Reading Skills", "Comprehension Strategies", "Text Analysis", "Critical Reading"], 20, 1),
                _unit("Writing Skills", "Essay writing and creative expression", [
                    "Essay Writing", "Letter Writing", "Story Writing", "Article Writing"], 25, 2),
                _unit("Grammar and Vocabulary", "Language structure and word power", [
                    "Parts of Speech", "Tenses", "Voice and Narration", "Vocabulary Building"], 20, 3),
                _unit("Literature", "Poetry, prose, and drama appreciation", [
                    "Poetry Analysis", "Prose Comprehension", "Drama Appreciation", "Literary Devices"], 20, 4),
            ]},
        ],
    },
    "cbse-10": {
        "title": "CBSE Class 10 Complete Syllabus Plan",
        "description": "Comprehensive day-wise study plan covering all subjects for CBSE Class 10",
        "subjects": [
            {"name": "Mathematics", "description": "Advanced mathematical concepts for board examination", "weightage": 25, "total_hours": 250, "units": [
                _unit("Real Numbers", "Number systems and fundamental theorem", [
                    "Real Numbers", "Euclid's Division Lemma", "Fundamental Theorem of Arithmetic",
                    "Irrational Numbers"], 15, 1),
                _unit("Polynomials", "Polynomial equations and their solutions", [
                    "Polynomials", "Zeroes of Polynomials", "Division Algorithm", "Geometric Meaning of Zeroes"], 20, 2),
                _unit("Pair of Linear Equations", "Linear equations in two variables", [
                    "Linear Equations in Two Variables", "Graphical Method", "Algebraic Methods", "Word Problems"], 25, 3),
                _unit("Quadratic Equations", "Quadratic equations and their applications", [
                    "Quadratic Equations", "Solution by Factorization", "Solution by Completing Square",
                    "Quadratic Formula"], 20, 4),
                _unit("Arithmetic Progressions", "Sequences and series", [
                    "Arithmetic Progressions", "nth Term", "Sum of n Terms", "Applications"], 15, 5),
                _unit("Triangles", "Similarity and congruence of triangles", [
                    "Similar Triangles", "Basic Proportionality Theorem", "Pythagoras Theorem", "Applications"], 20, 6),
                _unit("Coordinate Geometry", "Distance formula and section formula", [
                    "Distance Formula", "Section Formula", "Area of Triangle", "Applications"], 15, 7),
                _unit("Introduction to Trigonometry", "Trigonometric ratios and identities", [
                    "Trigonometric Ratios", "Trigonometric Identities", "Applications", "Heights and Distances"], 25, 8),
                _unit("Circles", "Properties of circles and tangents", [
                    "Tangent to a Circle", "Number of Tangents", "Properties of Tangents", "Applications"], 15, 9),
                _unit("Constructions", "Geometric constructions", [
                    "Division of Line Segment", "Construction of Triangles", "Construction of Tangents",
                    "Applications"], 15, 10),
                _unit("Areas Related to Circles", "Areas of circles and sectors", [
                    "Perimeter and Area of Circle", "Areas of Sector and Segment", "Areas of Combinations",
                    "Applications"], 15, 11),
                _unit("Surface Areas and Volumes", "Surface areas and volumes of solids", [
                    "Surface Area of Cuboid and Cube", "Surface Area of Right Circular Cylinder",
                    "Surface Area of Right Circular Cone", "Surface Area of Sphere", "Volume of Cuboid and Cube",
                    "Volume of Cylinder", "Volume of Cone", "Volume of Sphere"], 25, 12),
                _unit("Statistics", "Data analysis and probability", [
                    "Mean of Grouped Data", "Mode of Grouped Data", "Median of Grouped Data",
                    "Graphical Representation", "Probability"], 20, 13),
            ]},
        ],
    },
    "neet": {
        "title": "NEET Preparation Plan",
        "description": "Structured day-wise preparation plan for NEET medical entrance examination",
        "subjects": [
            {"name": "Physics", "description": "Medical entrance physics preparation", "weightage": 25, "total_hours": 180, "units": [
                _unit("Mechanics", "Motion, forces, and energy", [
                    "Kinematics", "Laws of Motion", "Work, Energy and Power", "Circular Motion", "Gravitation"], 40, 1),
                _unit("Thermodynamics", "Heat, temperature, and energy transfer", [
                    "Thermal Properties of Matter", "Laws of Thermodynamics", "Heat Transfer",
                    "Kinetic Theory of Gases"], 30, 2),
                _unit("Electromagnetism", "Electric and magnetic fields", [
                    "Electric Charges and Fields", "Electrostatic Potential", "Current Electricity",
                    "Magnetic Effects of Current", "Electromagnetic Induction"], 45, 3),
                _unit("Optics", "Light, reflection, and refraction", [
                    "Ray Optics", "Wave Optics", "Optical Instruments", "Dispersion and Scattering"], 35, 4),
                _unit("Modern Physics", "Quantum mechanics and nuclear physics", [
                    "Photoelectric Effect", "Atomic Structure", "Nuclear Physics", "Radioactivity"], 30, 5),
            ]},
            {"name": "Chemistry", "description": "Medical entrance chemistry preparation", "weightage": 25, "total_hours": 120, "units": [
                _unit("Physical Chemistry", "Chemical kinetics and thermodynamics", [
                    "Chemical Kinetics", "Chemical Thermodynamics", "Solutions", "Surface Chemistry",
                    "Electrochemistry"], 40, 1),
                _unit("Organic Chemistry", "Carbon compounds and reactions", [
                    "Basic Principles", "Hydrocarbons", "Alcohols and Ethers", "Aldehydes and Ketones",
                    "Carboxylic Acids", "Amines", "Biomolecules"], 50, 2),
                _unit("Inorganic Chemistry", "Chemical bonding and coordination compounds", [
                    "Chemical Bonding", "Coordination Compounds", "d and f Block Elements",
                    "Environmental Chemistry"], 30, 3),
            ]},
            {"name": "Biology", "description": "Medical entrance biology preparation", "weightage": 50, "total_hours": 280, "units": [
                _unit("Diversity in Living World", "Classification and biodiversity", [
                    "Living World", "Biological Classification", "Plant Kingdom", "Animal Kingdom"], 25, 1),
                _unit("Structural Organisation", "Cell structure and organization", [
                    "Morphology of Flowering Plants", "Anatomy of Flowering Plants",
                    "Structural Organisation in Animals"], 30, 2),
                _unit("Cell Structure and Function", "Cell biology and molecular biology", [
                    "Cell: The Unit of Life", "Biomolecules", "Cell Cycle and Cell Division", "Transport in Plants",
                    "Mineral Nutrition", "Photosynthesis", "Respiration in Plants",
                    "Plant Growth and Development"], 45, 3),
                _unit("Human Physiology", "Human body systems and functions", [
                    "Digestion and Absorption", "Breathing and Exchange of Gases", "Body Fluids and Circulation",
                    "Excretory Products", "Locomotion and Movement", "Neural Control and Coordination",
                    "Chemical Coordination and Integration"], 50, 4),
                _unit("Reproduction", "Reproductive systems and development", [
                    "Reproduction in Organisms", "Sexual Reproduction in Flowering Plants", "Human Reproduction",
                    "Reproductive Health"], 30, 5),
                _unit("Genetics and Evolution", "Heredity and evolutionary biology", [
                    "Principles of Inheritance and Variation", "Molecular Basis of Inheritance", "Evolution"], 35, 6),
                _unit("Biology and Human Welfare", "Health, disease, and biotechnology", [
                    "Human Health and Disease", "Strategies for Enhancement in Food Production",
                    "Microbes in Human Welfare", "Biotechnology: Principles and Processes",
                    "Biotechnology and Its Applications"], 40, 7),
                _unit("Biotechnology and Ecology", "Environmental biology and conservation", [
                    "Organisms and Populations", "Ecosystem", "Biodiversity and Conservation",
                    "Environmental Issues"], 25, 8),
            ]},
        ],
    },
    "mern-stack": {
        "title": "MERN Stack Development Roadmap",
        "description": "Complete day-wise roadmap for becoming a full-stack MERN developer",
        "subjects": [
            {"name": "MERN Stack", "description": "Full-stack web development with MongoDB, Express, React, Node.js", "weightage": 100, "total_hours": 180, "units": [
                _unit("HTML & CSS Fundamentals", "Web markup and styling basics", [
                    "HTML5 Structure", "CSS3 Styling", "Responsive Design", "CSS Flexbox and Grid",
                    "CSS Animations"], 20, 1),
                _unit("JavaScript Fundamentals", "Core JavaScript programming concepts", [
                    "Variables and Data Types", "Functions and Scope", "Arrays and Objects", "DOM Manipulation",
                    "ES6+ Features", "Async Programming", "Error Handling"], 30, 2),
                _unit("React.js", "Frontend library for building user interfaces", [
                    "React Components", "Props and State", "Lifecycle Methods", "Hooks (useState, useEffect)",
                    "Event Handling", "Conditional Rendering", "Lists and Keys", "Forms and Controlled Components",
                    "React Router", "Context API", "Custom Hooks"], 40, 3),
                _unit("Node.js & Express.js", "Backend JavaScript runtime and web framework", [
                    "Node.js Basics", "Express.js Framework", "Routing and Middleware", "Request/Response Handling",
                    "Error Handling", "Authentication & Authorization", "File Upload", "API Development",
                    "Testing with Jest"], 35, 4),
                _unit("MongoDB", "NoSQL database for modern applications", [
                    "MongoDB Basics", "CRUD Operations", "Data Modeling", "Indexing", "Aggregation Pipeline",
                    "MongoDB Atlas", "Mongoose ODM"], 25, 5),
                _unit("Full-Stack Integration", "Connecting frontend and backend", [
                    "API Integration", "State Management", "Authentication Flow", "Error Handling", "Deployment",
                    "Performance Optimization", "Security Best Practices"], 30, 6),
            ]},
        ],
    },
    "ai-ml": {
        "title": "AI/ML Learning Roadmap",
        "description": "Artificial Intelligence and Machine Learning fundamentals",
        "subjects": [
            {"name": "AI/ML", "description": "Artificial Intelligence and Machine Learning fundamentals", "weightage": 100, "total_hours": 180, "units": [
                _unit("Python for AI/ML", "Python programming for data science", [
                    "Python Basics", "NumPy", "Pandas", "Matplotlib", "Seaborn", "Jupyter Notebooks"], 25, 1),
                _unit("Mathematics for ML", "Mathematical foundations for machine learning", [
                    "Linear Algebra", "Calculus", "Statistics", "Probability", "Optimization"], 30, 2),
                _unit("Supervised Learning", "Classification and regression algorithms", [
                    "Linear Regression", "Logistic Regression", "Decision Trees", "Random Forest",
                    "Support Vector Machines", "Naive Bayes", "K-Nearest Neighbors"], 35, 3),
                _unit("Unsupervised Learning", "Clustering and dimensionality reduction", [
                    "K-Means Clustering", "Hierarchical Clustering", "Principal Component Analysis", "DBSCAN",
                    "Association Rules"], 25, 4),
                _unit("Deep Learning", "Neural networks and deep learning", [
                    "Neural Networks Basics", "Backpropagation", "Convolutional Neural Networks",
                    "Recurrent Neural Networks", "TensorFlow/Keras", "PyTorch"], 40, 5),
                _unit("Model Evaluation & Deployment", "Model validation and production deployment", [
                    "Cross-Validation", "Hyperparameter Tuning", "Model Evaluation Metrics", "Feature Engineering",
                    "Model Deployment", "MLOps Basics"], 25, 6),
            ]},
        ],
    },
}

TECHNOLOGY_PRESET_KEYS = {
    "mern stack": "mern-stack",
    "ai/ml": "ai-ml",
}


# ── roadmap.sh stage roadmaps (converted to curricula on demand) ────────────

ROADMAP_STAGES: dict[str, dict] = {
    "frontend": {
        "title": "Frontend Development Roadmap",
        "description": "Complete roadmap to become a frontend developer",
        "stages": [
            {"name": "Basics", "topics": [
                {"name": "HTML", "description": "Learn HTML structure and semantics", "duration": 20},
                {"name": "CSS", "description": "Master CSS styling and layout", "duration": 30},
                {"name": "JavaScript", "description": "Learn JavaScript fundamentals", "duration": 40},
            ]},
            {"name": "Advanced Frontend", "topics": [
                {"name": "React", "description": "Learn React.js framework", "duration": 35},
                {"name": "Vue.js", "description": "Alternative frontend framework", "duration": 30},
                {"name": "TypeScript", "description": "Type-safe JavaScript", "duration": 25},
            ]},
            {"name": "Build Tools", "topics": [
                {"name": "Webpack", "description": "Module bundler", "duration": 20},
                {"name": "Vite", "description": "Modern build tool", "duration": 15},
                {"name": "Testing", "description": "Jest, Cypress, etc.", "duration": 25},
            ]},
        ],
    },
    "backend": {
        "title": "Backend Development Roadmap",
        "description": "Complete roadmap to become a backend developer",
        "stages": [
            {"name": "Programming Fundamentals", "topics": [
                {"name": "Python", "description": "Learn Python programming", "duration": 30},
                {"name": "Node.js", "description": "JavaScript runtime", "duration": 25},
                {"name": "Java", "description": "Enterprise programming", "duration": 35},
            ]},
            {"name": "Databases", "topics": [
                {"name": "SQL", "description": "Relational databases", "duration": 25},
                {"name": "MongoDB", "description": "NoSQL database", "duration": 20},
                {"name": "Redis", "description": "In-memory database", "duration": 15},
            ]},
            {"name": "APIs & Frameworks", "topics": [
                {"name": "Express.js", "description": "Node.js web framework", "duration": 20},
                {"name": "Django", "description": "Python web framework", "duration": 25},
                {"name": "Spring Boot", "description": "Java framework", "duration": 30},
            ]},
        ],
    },
    "fullstack": {
        "title": "Full Stack Development Roadmap",
        "description": "Complete roadmap to become a full stack developer",
        "stages": [
            {"name": "Frontend", "topics": [
                {"name": "HTML/CSS/JS", "description": "Frontend fundamentals", "duration": 30},
                {"name": "React", "description": "Frontend framework", "duration": 25},
                {"name": "State Management", "description": "Redux, Context API", "duration": 20},
            ]},
            {"name": "Backend", "topics": [
                {"name": "Node.js", "description": "JavaScript backend", "duration": 25},
                {"name": "Express.js", "description": "Web framework", "duration": 20},
                {"name": "Database Design", "description": "SQL and NoSQL", "duration": 25},
            ]},
            {"name": "DevOps", "topics": [
                {"name": "Git", "description": "Version control", "duration": 15},
                {"name": "Docker", "description": "Containerization", "duration": 20},
                {"name": "Deployment", "description": "Cloud platforms", "duration": 20},
            ]},
        ],
    },
    "data-science": {
        "title": "Data Science Roadmap",
        "description": "Complete roadmap to become a data scientist",
        "stages": [
            {"name": "Mathematics", "topics": [
                {"name": "Statistics", "description": "Statistical analysis", "duration": 30},
                {"name": "Linear Algebra", "description": "Mathematical foundations", "duration": 25},
                {"name": "Calculus", "description": "Mathematical concepts", "duration": 20},
            ]},
            {"name": "Programming", "topics": [
                {"name": "Python", "description": "Primary language", "duration": 25},
                {"name": "R", "description": "Statistical programming", "duration": 20},
                {"name": "SQL", "description": "Data querying", "duration": 15},
            ]},
            {"name": "Machine Learning", "topics": [
                {"name": "Scikit-learn", "description": "ML library", "duration": 25},
                {"name": "TensorFlow", "description": "Deep learning", "duration": 30},
                {"name": "Data Visualization", "description": "Matplotlib, Seaborn", "duration": 20},
            ]},
        ],
    },
    "cybersecurity": {
        "title": "Cybersecurity Roadmap",
        "description": "Complete roadmap to become a cybersecurity expert",
        "stages": [
            {"name": "Networking", "topics": [
                {"name": "Network Fundamentals", "description": "TCP/IP, protocols", "duration": 25},
                {"name": "Network Security", "description": "Firewalls, VPNs", "duration": 20},
                {"name": "Wireless Security", "description": "WiFi security", "duration": 15},
            ]},
            {"name": "Security Tools", "topics": [
                {"name": "Wireshark", "description": "Network analysis", "duration": 20},
                {"name": "Metasploit", "description": "Penetration testing", "duration": 25},
                {"name": "Nmap", "description": "Network scanning", "duration": 15},
            ]},
            {"name": "Ethical Hacking", "topics": [
                {"name": "Web Application Security", "description": "OWASP Top 10", "duration": 30},
                {"name": "Social Engineering", "description": "Human factor security", "duration": 20},
                {"name": "Incident Response", "description": "Security incident handling", "duration": 25},
            ]},
        ],
    },
}


# ── Defaults when the caller names no subjects and no preset ────────────────

STUDENT_TYPE_DEFAULTS: dict[str, list[dict]] = {
    "school": [
        {"name": "Mathematics", "description": "Core mathematical concepts and problem-solving", "weightage": 25, "total_hours": 20, "units": [
            _unit("Basic Mathematics", "Fundamental mathematical concepts", [
                "Numbers", "Algebra", "Geometry", "Statistics"], 20, 1)]},
        {"name": "Science", "description": "Scientific concepts and experiments", "weightage": 25, "total_hours": 20, "units": [
            _unit("Basic Science", "Introduction to scientific concepts", [
                "Physics", "Chemistry", "Biology", "Experiments"], 20, 1)]},
        {"name": "English", "description": "Language and communication skills", "weightage": 20, "total_hours": 15, "units": [
            _unit("Language Skills", "Reading, writing, and communication", [
                "Grammar", "Vocabulary", "Comprehension", "Writing"], 15, 1)]},
        {"name": "Social Studies", "description": "History, geography, and civics", "weightage": 15, "total_hours": 15, "units": [
            _unit("Social Sciences", "Understanding society and environment", [
                "History", "Geography", "Civics", "Economics"], 15, 1)]},
        {"name": "Computer Science", "description": "Technology and programming basics", "weightage": 15, "total_hours": 15, "units": [
            _unit("Technology Fundamentals", "Basic computer and programming concepts", [
                "Computer Basics", "Programming", "Internet", "Applications"], 15, 1)]},
    ],
    "college": [
        {"name": "Programming Fundamentals", "description": "Core programming concepts and practices", "weightage": 30, "total_hours": 25, "units": [
            _unit("Basic Programming", "Introduction to programming concepts", [
                "Variables", "Control Structures", "Functions", "Data Types"], 25, 1)]},
        {"name": "Web Development", "description": "Frontend and backend web technologies", "weightage": 30, "total_hours": 25, "units": [
            _unit("Web Technologies", "HTML, CSS, JavaScript fundamentals", [
                "HTML", "CSS", "JavaScript", "Responsive Design"], 25, 1)]},
        {"name": "Database Management", "description": "Database design and management", "weightage": 20, "total_hours": 20, "units": [
            _unit("Database Concepts", "Database design and SQL", [
                "Database Design", "SQL", "Normalization", "Relationships"], 20, 1)]},
        {"name": "Software Engineering", "description": "Software development methodologies", "weightage": 20, "total_hours": 20, "units": [
            _unit("Development Process", "Software development lifecycle", [
                "Requirements", "Design", "Implementation", "Testing"], 20, 1)]},
    ],
}

GENERIC_FALLBACK_SUBJECTS: list[dict] = [
    {"name": "Mathematics", "description": "Core mathematical concepts", "weightage": 50, "total_hours": 20, "units": [
        _unit("Basic Mathematics", "Fundamental concepts", ["Numbers", "Algebra", "Geometry"], 20, 1)]},
    {"name": "Science", "description": "Scientific concepts and experiments", "weightage": 50, "total_hours": 20, "units": [
        _unit("Basic Science", "Introduction to science", ["Physics", "Chemistry", "Biology"], 20, 1)]},
]


def get_available_roadmaps() -> list[dict]:
    """Return roadmap keys with titles, stage roadmaps first, then named presets."""
    stage = [{"id": key, "title": data["title"], "description": data["description"], "kind": "roadmap"}
             for key, data in ROADMAP_STAGES.items()]
    presets = [{"id": key, "title": data["title"], "description": data["description"], "kind": "preset"}
               for key, data in SYLLABUS_PRESETS.items()]
    return stage + presets
