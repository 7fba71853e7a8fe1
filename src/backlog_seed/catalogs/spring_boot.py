"""Task catalog for the Spring Boot product catalog service."""

# ruff: noqa: E501

from __future__ import annotations

from backlog_seed.models import TaskCatalog, TaskDescriptor, task_create

_DESIGN_DOC_PLAN = """\
Implementation Plan:
1. Create a new Markdown file at './docs/api-design-product-catalog.md'.
2. Populate the file with the following sections and content.
3. **Section 1: Purpose**
   - Add a brief description: "To create a robust and modern RESTful service for product catalog management, serving as a portfolio piece and a baseline for framework comparisons."
4. **Section 2: Key Decisions**
   - Document the following decisions:
     - **Technology Stack**: Java 21 (LTS), Spring Boot 3.x, Maven.
     - **Database**: PostgreSQL (image 'postgres:17.5-alpine'), managed via Docker Compose.
     - **Schema Management**: Flyway will be used. Hibernate's 'ddl-auto' will be set to 'validate'.
     - **Entity IDs**: Primary keys will be UUIDs.
     - **SKU Logic**: Auto-generated ('[NNN]-######') if not provided; validated against a format if provided.
     - **Atomicity**: Bulk creation will be transactional.
     - **Health Checks**: A '/actuator/health' endpoint will be exposed.
     - **E2E Testing**: A dedicated Maven module will test the full 'docker-compose' stack with Testcontainers.
5. **Section 3: Data Model**
   - Add the following Markdown table defining the 'Product' entity:
| Field       | Data Type      | Constraints                  | Description                                 |
| :---------- | :------------- | :--------------------------- | :------------------------------------------ |
| id          | String         | Primary Key, UUID            | Unique identifier for the product.          |
| sku         | String         | Not Null, Unique             | Stock Keeping Unit. Auto-generated if null. |
| name        | String         | Not Null                     | Product's name.                             |
| description | String         |                              | Detailed product description.               |
| price       | BigDecimal     | Not Null                     | Price of the product.                       |
| category    | String         |                              | Simple text-based product category.         |
| createdAt   | Instant        |                              | Timestamp of creation (auto-managed).     |
| updatedAt   | Instant        |                              | Timestamp of last update (auto-managed).  |
6. **Section 4: API Endpoints**
   - Add the following Markdown table summarizing the API contract:
| Method | Path                               | Description                           |
| :----- | :--------------------------------- | :------------------------------------ |
| POST   | /api/v1/products                   | Creates a single new product.         |
| POST   | /api/v1/products/batch-create      | Creates multiple products atomically. |
| GET    | /api/v1/products/{id}              | Retrieves a single product by its ID. |
| GET    | /api/v1/products                   | Retrieves a paginated list of products. |
| GET    | /api/v1/products/export?format=json| Exports all products to a JSON file.  |
| PUT    | /api/v1/products/{id}              | Updates an existing product.          |
| DELETE | /api/v1/products/{id}              | Deletes a product.                    |"""

SPRING_BOOT = TaskCatalog(
    name="spring-boot",
    project="Spring Boot",
    tasks=(
        TaskDescriptor(
            command=task_create(
                "Create and Detail the API Design Document",
                priority="critical",
                labels=("documentation", "design"),
            ),
            plan=_DESIGN_DOC_PLAN,
            acceptance_criteria=(
                "The Markdown document 'api-design-product-catalog.md' is created in the ./docs directory.,"
                "The document contains all four specified sections (Purpose, Key Decisions, Data Model, API Endpoints).,"
                "The content accurately and completely reflects all the details defined in the plan.,"
                "Human review and approval of the final document."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Set Up Initial Spring Boot Project using MCP Tool",
                priority="high",
                labels=("setup", "spring-boot", "mcp"),
                depends_on=("task-1",),
                description="Use the springinitializr-mcp tool to generate the base project structure.",
            ),
            plan="""\
Implementation Plan:
1. Use the 'springinitializr-mcp' tool to generate the project with dependencies: 'web', 'data-jpa', 'postgresql', 'flyway-migration', 'validation', 'lombok', 'actuator'.
2. Once generated, navigate into its root directory.
3. In 'src/main/resources/application.properties', set 'spring.jpa.hibernate.ddl-auto=validate'.
4. Run 'mvn clean package' to verify the setup.""",
            acceptance_criteria=(
                "The project has been generated using the mcp tool.,"
                "The 'pom.xml' contains 'flyway-core' and 'spring-boot-starter-actuator'.,"
                "'application.properties' contains 'spring.jpa.hibernate.ddl-auto=validate'.,"
                "'mvn clean package' completes without errors.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Initialize Git Repository and Branches",
                priority="critical",
                labels=("setup", "git"),
                depends_on=("task-2",),
                description="Initialize a Git repository within the newly created project directory.",
            ),
            plan="""\
Implementation Plan:
1. Navigate into the generated project's root directory ('product-catalog-spring').
2. Run 'git init'.
3. Create a '.gitignore' file if one doesn't exist.
4. Stage all generated files ('git add .').
5. Make the first commit: 'git commit -m "chore: initial commit of Spring Boot project"'.
6. Rename the current branch to 'main' if needed.
7. Create the 'develop' branch from 'main'.""",
            acceptance_criteria=(
                "A '.git' directory exists in the project root.,"
                "The 'main' and 'develop' branches exist.,"
                "The initial commit with all generated files exists.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Create Remote GitHub Repository",
                priority="critical",
                labels=("setup", "git", "github"),
                depends_on=("task-3",),
                description="Create a remote repository on GitHub and link the local repository to it.",
            ),
            plan="""\
Implementation Plan:
1. Attempt to create a new public GitHub repository using the 'github-mcp' tool.
2. If the MCP tool fails, attempt to use the GitHub CLI ('gh repo create ...').
3. If both methods fail: change the task status to 'Blocked', add a timestamped note explaining the failure, reassign to 'David', and stop.
4. If successful, push the 'main' and 'develop' branches to the remote origin.""",
            acceptance_criteria=(
                "A remote repository exists on GitHub.,"
                "The local repository is linked to the remote 'origin'.,"
                "Both 'main' and 'develop' branches are pushed to the remote.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Set Up PostgreSQL with Docker Compose",
                priority="high",
                labels=("db", "docker", "postgres"),
                depends_on=("task-2",),
                description="Create a reproducible PostgreSQL database environment using Docker Compose.",
            ),
            plan="""\
Implementation Plan:
1. In the project's root directory, create 'docker-compose.yml'.
2. Define a service 'postgres-db' using the image 'postgres:17.5-alpine'.
3. Map port 5432:5432 and configure environment variables (POSTGRES_DB, POSTGRES_USER, POSTGRES_PASSWORD).
4. Define a named volume for data persistence.
5. In 'application.properties', add the datasource properties to connect to the Docker container.""",
            acceptance_criteria=(
                "'docker-compose.yml' exists and defines the 'postgres-db' service.,"
                "'application.properties' has correct datasource properties.,"
                "'docker-compose up -d' starts the container successfully.,"
                "The Spring Boot application connects to the database.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Define the 'Product' JPA Entity",
                priority="high",
                labels=("db", "jpa", "entity"),
                depends_on=("task-2",),
                description="Create the 'Product' entity class.",
            ),
            plan="""\
Implementation Plan:
1. Create package 'com.thedavestack.productcatalog.model'.
2. Create class 'Product.java'.
3. Use @Data, @NoArgsConstructor, @AllArgsConstructor, @Entity, @Table(name = "products").
4. Define fields: id (String), sku (String), name (String), description (String), price (BigDecimal), category (String), createdAt (Instant), updatedAt (Instant).
5. Annotate 'id' with @Id and @GeneratedValue(strategy = GenerationType.UUID).
6. Add @Column constraints to sku, name, and price.
7. Use @CreationTimestamp and @UpdateTimestamp for automatic date management.""",
            acceptance_criteria=(
                "'Product.java' exists in the correct package.,"
                "Class is correctly annotated.,"
                "Fields use 'BigDecimal' and 'Instant'.,"
                "'id' is the UUID primary key.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Create Initial DB Schema with Flyway",
                priority="high",
                labels=("db", "migration", "flyway"),
                depends_on=("task-5", "task-6"),
                description="Create the first Flyway migration script for the 'products' table.",
            ),
            plan="""\
Implementation Plan:
1. In 'src/main/resources/db/migration', create a new SQL file named 'V1__Create_products_table.sql'.
2. Write the 'CREATE TABLE products (...)' SQL statement in this file.
3. The table schema must match the fields defined in the 'Product' entity, including types and constraints.""",
            acceptance_criteria=(
                "A SQL migration file exists in 'src/main/resources/db/migration'.,"
                "The SQL script contains the correct 'CREATE TABLE' statement.,"
                "Flyway successfully applies the migration on application startup.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Create the 'ProductRepository' Interface",
                priority="high",
                labels=("db", "jpa", "repository"),
                depends_on=("task-6",),
                description="Create the Spring Data JPA repository for the 'Product' entity.",
            ),
            plan="""\
Implementation Plan:
1. Create package 'com.thedavestack.productcatalog.repository'.
2. Create interface 'ProductRepository.java'.
3. Extend 'JpaRepository<Product, String>'.
4. Add method signatures: 'Optional<Product> findBySku(String sku);' and 'boolean existsBySku(String sku);'.""",
            acceptance_criteria=(
                "'ProductRepository.java' exists.,"
                "It extends 'JpaRepository<Product, String>'.,"
                "It includes 'findBySku' and 'existsBySku' methods.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Implement Business Logic in 'ProductService'",
                priority="high",
                labels=("service", "business-logic"),
                depends_on=("task-8",),
                description="Create the service layer to orchestrate product management logic.",
            ),
            plan="""\
Implementation Plan:
1. Create package 'com.thedavestack.productcatalog.service' and class 'ProductService.java'.
2. Annotate with @Service and inject 'ProductRepository'.
3. Implement 'createProduct', including SKU generation and duplicate validation logic.
4. Implement 'createMultipleProducts' with @Transactional annotation.
5. Implement all other CRUD methods (findById, findAll, update, delete), handling not-found scenarios with exceptions.""",
            acceptance_criteria=(
                "'ProductService.java' exists and is annotated with @Service.,"
                "All CRUD and batch-create methods are implemented.,"
                "SKU logic is correctly handled.,"
                "Batch creation is @Transactional.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Implement REST Endpoints in 'ProductController'",
                priority="high",
                labels=("api", "controller", "rest"),
                depends_on=("task-9",),
                description="Expose business logic via RESTful endpoints, using DTOs and a global exception handler.",
            ),
            plan="""\
Implementation Plan:
1. Create 'com.thedavestack.productcatalog.dto' package and define DTOs ('ProductResponse', 'CreateProductRequest') with validation annotations.
2. Create 'com.thedavestack.productcatalog.controller' package and class 'ProductController.java'.
3. Annotate with @RestController and @RequestMapping("/api/v1/products").
4. Implement methods for all MVP endpoints, using DTOs for request and response bodies.
5. Implement a mapper component to convert between entities and DTOs.
6. Create a @ControllerAdvice class to handle custom exceptions and return appropriate HTTP errors.""",
            acceptance_criteria=(
                "'ProductController.java' and DTOs exist.,"
                "All MVP endpoints are implemented.,"
                "A @ControllerAdvice exception handler is implemented.,"
                "API uses DTOs exclusively.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Add Unit, Repository, and Integration Tests",
                priority="high",
                labels=("test", "junit", "mockito", "testcontainers"),
                depends_on=("task-10",),
                description="Create a comprehensive test suite for all layers.",
            ),
            plan="""\
Implementation Plan:
1. Add 'Testcontainers' dependency to pom.xml.
2. Create Unit Tests for 'ProductService' using Mockito.
3. Create Repository Tests for 'ProductRepository' using @DataJpaTest.
4. Create Integration Tests for 'ProductController' using @SpringBootTest, Testcontainers, and MockMvc.""",
            acceptance_criteria=(
                "Unit tests for 'ProductService' are implemented.,"
                "@DataJpaTest tests for 'ProductRepository' are implemented.,"
                "Integration tests for 'ProductController' with Testcontainers are implemented.,"
                "'mvn clean package' runs all tests successfully.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Create and Verify Application Dockerfile",
                priority="medium",
                labels=("docker", "deployment", "healthcheck"),
                depends_on=("task-11",),
                description="Create a multi-stage Dockerfile with a HEALTHCHECK and verification process.",
            ),
            plan="""\
Implementation Plan:
1. Create a 'Dockerfile' in the project root.
2. Implement a multi-stage build (build stage with Maven, runtime stage with JRE).
3. Add a 'HEALTHCHECK' instruction pointing to '/actuator/health'.
4. In 'application.properties', ensure the health endpoint is exposed.
5. Verify the image by running it with '--rm', checking its health, and stopping it.""",
            acceptance_criteria=(
                "'Dockerfile' with multi-stage build and HEALTHCHECK exists.,"
                "'docker build' completes successfully.,"
                "The verification process (run, check health, stop) completes successfully.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Update Final Project Documentation (README.md)",
                priority="low",
                labels=("documentation",),
                depends_on=("task-12",),
                description="Create clear documentation on how to set up, build, and run the project.",
            ),
            plan="""\
Implementation Plan:
1. Edit 'README.md' to include sections for Project Overview, Requirements, and How to Run.
2. Update 'docker-compose.yml' to include the application service, allowing the full stack to be run with 'docker-compose up'.
3. Add a summary table of API Endpoints.
4. Run 'backlog board export --readme' to embed the Kanban board.""",
            acceptance_criteria=(
                "'README.md' is updated and well-structured.,"
                "'docker-compose.yml' is updated to include the application service.,"
                "The Kanban board is embedded in the README.,"
                "Human review and approval."
            ),
        ),
        TaskDescriptor(
            command=task_create(
                "Create Java-based E2E Tests using Testcontainers",
                priority="medium",
                labels=("test", "e2e", "docker-compose", "testcontainers"),
                depends_on=("task-13",),
                description="Create a dedicated Maven module for E2E tests using Testcontainers to manage the full docker-compose stack.",
            ),
            plan="""\
Implementation Plan:
1. Create a new Maven module named 'e2e-tests'.
2. Add dependencies for Testcontainers, RestAssured, and JUnit 5.
3. Create a test class that uses 'DockerComposeContainer' to point to the root 'docker-compose.yml'.
4. Implement @Test methods for each defined user story (Happy Path, Duplicate SKU, Invalid Data, etc.).
5. Use RestAssured to make HTTP calls and assert responses.""",
            acceptance_criteria=(
                "A new Maven module 'e2e-tests' exists.,"
                "The E2E test class uses 'DockerComposeContainer'.,"
                "Test methods covering all user stories are implemented.,"
                "All E2E tests pass.,"
                "Human review and approval."
            ),
        ),
    ),
)
