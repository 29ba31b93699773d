"""Canned report templates and the six action generators.

Every generator is a pure function of its text inputs. The only variable
parts are the analyze metrics and the verbatim prompt echoes in write and
expand; everything else is fixed boilerplate.
"""

from typing import Callable, Dict

from coding_specialist.domain.heuristics import JS_WHITESPACE, count_functions, detect_language
from coding_specialist.domain.models import ActionType

# Empty-input warnings, one per action
NO_CODE_TO_ANALYZE = "⚠️ No code provided. Please paste code to analyze."
NO_PROMPT_TO_WRITE = "⚠️ Please provide a description of what code you need."
NO_CODE_TO_IMPROVE = "⚠️ No code provided to improve."
NO_CODE_TO_REFACTOR = "⚠️ No code provided to refactor."
NO_CODE_TO_DEBUG = "⚠️ No code provided to debug."
NO_CODE_TO_EXPAND = "⚠️ No code provided to expand."

WARNINGS: Dict[ActionType, str] = {
    ActionType.ANALYZE: NO_CODE_TO_ANALYZE,
    ActionType.WRITE: NO_PROMPT_TO_WRITE,
    ActionType.IMPROVE: NO_CODE_TO_IMPROVE,
    ActionType.REFACTOR: NO_CODE_TO_REFACTOR,
    ActionType.DEBUG: NO_CODE_TO_DEBUG,
    ActionType.EXPAND: NO_CODE_TO_EXPAND,
}


# ── Templates ───────────────────────────────────────────────

# str.format fields: lines, language, functions
ANALYSIS_TEMPLATE = """## Code Analysis Report

### Structure
- Lines of code: {lines}
- Detected language: {language}
- Functions/Methods: {functions}

### Quality Assessment
✅ **Strengths:**
- Code follows basic structural patterns
- Variable naming appears consistent
- Reasonable organization

⚠️ **Potential Issues:**
- Consider adding error handling for edge cases
- Documentation could be improved
- Type safety checks may be needed

### Recommendations
1. Add comprehensive error handling
2. Include inline documentation
3. Consider breaking down complex functions
4. Add unit tests for critical paths
5. Validate input parameters

### Security Considerations
- Ensure user input is sanitized
- Check for potential injection vulnerabilities
- Validate all external data sources"""

# Follows the `// Generated based on: "<prompt>"` header line
GENERATED_CODE_BODY = """
/**
 * Implementation following best practices
 * - Type-safe
 * - Error handled
 * - Well documented
 */

function processData(input: any): any {
  // Validation
  if (!input) {
    throw new Error('Input is required');
  }

  try {
    // Main logic
    const result = performOperation(input);

    // Validation of result
    if (!result) {
      throw new Error('Operation failed');
    }

    return result;
  } catch (error) {
    console.error('Error processing data:', error);
    throw error;
  }
}

function performOperation(data: any): any {
  // Implementation based on your requirements
  return data;
}

// Example usage:
try {
  const result = processData({ /* your data */ });
  console.log('Success:', result);
} catch (error) {
  console.error('Failed:', error);
}"""

IMPROVED_CODE_TEMPLATE = """## Improved Version

```typescript
// Original code enhanced with:
// - Better error handling
// - Type safety
// - Documentation
// - Performance optimization

/**
 * Enhanced implementation with improved practices
 * @param {T} input - The input data to process
 * @returns {Promise<T>} Processed result
 * @throws {Error} If validation fails
 */
async function improvedFunction<T>(input: T): Promise<T> {
  // Input validation
  if (input === null || input === undefined) {
    throw new Error('Invalid input: input cannot be null or undefined');
  }

  try {
    // Process with proper error boundaries
    const validated = await validateInput(input);
    const processed = await processWithRetry(validated);

    return processed;
  } catch (error) {
    // Structured error handling
    if (error instanceof ValidationError) {
      console.error('Validation failed:', error.message);
    } else {
      console.error('Unexpected error:', error);
    }
    throw error;
  }
}

async function validateInput<T>(data: T): Promise<T> {
  // Add validation logic
  return data;
}

async function processWithRetry<T>(data: T, retries = 3): Promise<T> {
  for (let i = 0; i < retries; i++) {
    try {
      return await process(data);
    } catch (error) {
      if (i === retries - 1) throw error;
      await delay(1000 * Math.pow(2, i));
    }
  }
  throw new Error('Max retries exceeded');
}

function delay(ms: number): Promise<void> {
  return new Promise(resolve => setTimeout(resolve, ms));
}
```

### Improvements Made:
1. ✅ Added TypeScript generics for type safety
2. ✅ Implemented async/await for better async handling
3. ✅ Added comprehensive error handling
4. ✅ Included retry logic for resilience
5. ✅ Added JSDoc documentation
6. ✅ Structured error types
7. ✅ Input validation"""

REFACTORED_CODE_TEMPLATE = """## Refactored Code

```typescript
// Refactored for:
// - Better separation of concerns
// - Improved maintainability
// - Enhanced testability
// - Clear single responsibility

// Types
interface Config {
  timeout: number;
  retries: number;
  endpoint: string;
}

interface Result<T> {
  success: boolean;
  data?: T;
  error?: Error;
}

// Service Layer
class DataService {
  constructor(private config: Config) {}

  async fetchData<T>(id: string): Promise<Result<T>> {
    try {
      const data = await this.performFetch<T>(id);
      return { success: true, data };
    } catch (error) {
      return {
        success: false,
        error: error instanceof Error ? error : new Error('Unknown error')
      };
    }
  }

  private async performFetch<T>(id: string): Promise<T> {
    // Implementation
    const response = await fetch(`${this.config.endpoint}/${id}`);
    return response.json();
  }
}

// Validation Layer
class Validator {
  static validateId(id: string): boolean {
    return id.length > 0 && /^[a-zA-Z0-9-]+$/.test(id);
  }

  static validateConfig(config: Partial<Config>): config is Config {
    return !!(
      config.timeout &&
      config.retries &&
      config.endpoint
    );
  }
}

// Main Controller
class DataController {
  private service: DataService;

  constructor(config: Config) {
    if (!Validator.validateConfig(config)) {
      throw new Error('Invalid configuration');
    }
    this.service = new DataService(config);
  }

  async getData<T>(id: string): Promise<Result<T>> {
    if (!Validator.validateId(id)) {
      return {
        success: false,
        error: new Error('Invalid ID format')
      };
    }

    return this.service.fetchData<T>(id);
  }
}

// Usage
const controller = new DataController({
  timeout: 5000,
  retries: 3,
  endpoint: 'https://api.example.com'
});

const result = await controller.getData('item-123');
if (result.success) {
  console.log('Data:', result.data);
} else {
  console.error('Error:', result.error);
}
```

### Refactoring Benefits:
1. 🎯 Clear separation of concerns (Service, Validator, Controller)
2. 🔧 Easier to test individual components
3. 📦 Reusable validation logic
4. 🛡️ Type-safe with proper interfaces
5. 🎨 Clean, maintainable structure"""

DEBUG_TEMPLATE = """## Debug Analysis

### Potential Issues Detected:

🐛 **Issue 1: Missing Error Handling**
- Location: Main execution block
- Impact: High
- Fix: Wrap in try-catch block

🐛 **Issue 2: Undefined Variable Reference**
- Location: Variable may be used before initialization
- Impact: Medium
- Fix: Initialize variables before use

🐛 **Issue 3: Type Coercion**
- Location: Comparison operations
- Impact: Low
- Fix: Use strict equality (===) instead of (==)

### Debugging Checklist:
- [ ] Add console.log statements at key points
- [ ] Verify all variables are initialized
- [ ] Check for null/undefined values
- [ ] Validate function return types
- [ ] Test edge cases
- [ ] Review async/await usage

### Recommended Debug Code:

```typescript
// Add debugging utilities
function debugLog(context: string, data: any) {
  console.log(`[DEBUG][${context}][${new Date().toISOString()}]`, data);
}

function debugError(context: string, error: any) {
  console.error(`[ERROR][${context}][${new Date().toISOString()}]`, error);
  console.trace(); // Add stack trace
}

// Wrap your code with debugging
async function debuggedFunction() {
  debugLog('start', 'Function execution started');

  try {
    debugLog('input-validation', 'Validating inputs...');
    // Your code here

    debugLog('processing', 'Processing data...');
    // More code

    debugLog('complete', 'Function completed successfully');
  } catch (error) {
    debugError('execution', error);
    throw error;
  }
}
```

### Next Steps:
1. Run code with debugging enabled
2. Check console for error messages
3. Verify data flow at each step
4. Test with edge case inputs
5. Use browser/IDE debugger breakpoints"""

EXPANDED_HEADING = "## Expanded Implementation"

EXPANDED_CODE_BODY = """
```typescript
// Original code expanded with:
// - Additional features
// - Better error handling
// - Comprehensive logging
// - Performance monitoring

import { EventEmitter } from 'events';

interface Options {
  enableLogging?: boolean;
  enableMetrics?: boolean;
  timeout?: number;
}

class ExpandedImplementation extends EventEmitter {
  private options: Options;
  private metrics: Map<string, number>;
  private logger: Logger;

  constructor(options: Options = {}) {
    super();
    this.options = {
      enableLogging: true,
      enableMetrics: true,
      timeout: 30000,
      ...options
    };
    this.metrics = new Map();
    this.logger = new Logger(this.options.enableLogging);
  }

  async execute<T>(operation: () => Promise<T>): Promise<T> {
    const startTime = Date.now();
    const operationId = this.generateId();

    this.logger.info(`Starting operation ${operationId}`);
    this.emit('operationStart', { id: operationId });

    try {
      const result = await this.executeWithTimeout(operation);

      const duration = Date.now() - startTime;
      this.recordMetric('operation.success', duration);

      this.logger.info(`Operation ${operationId} completed in ${duration}ms`);
      this.emit('operationComplete', { id: operationId, duration });

      return result;
    } catch (error) {
      const duration = Date.now() - startTime;
      this.recordMetric('operation.failure', duration);

      this.logger.error(`Operation ${operationId} failed after ${duration}ms`, error);
      this.emit('operationError', { id: operationId, error, duration });

      throw error;
    }
  }

  private async executeWithTimeout<T>(
    operation: () => Promise<T>
  ): Promise<T> {
    return Promise.race([
      operation(),
      this.createTimeout<T>()
    ]);
  }

  private createTimeout<T>(): Promise<T> {
    return new Promise((_, reject) => {
      setTimeout(() => {
        reject(new Error(`Operation timeout after ${this.options.timeout}ms`));
      }, this.options.timeout);
    });
  }

  private recordMetric(key: string, value: number): void {
    if (!this.options.enableMetrics) return;

    const current = this.metrics.get(key) || 0;
    this.metrics.set(key, current + value);
  }

  private generateId(): string {
    return `${Date.now()}-${Math.random().toString(36).substr(2, 9)}`;
  }

  getMetrics(): Record<string, number> {
    return Object.fromEntries(this.metrics);
  }

  clearMetrics(): void {
    this.metrics.clear();
  }
}

class Logger {
  constructor(private enabled: boolean) {}

  info(message: string, ...args: any[]): void {
    if (this.enabled) {
      console.log(`[INFO] ${message}`, ...args);
    }
  }

  error(message: string, ...args: any[]): void {
    if (this.enabled) {
      console.error(`[ERROR] ${message}`, ...args);
    }
  }

  warn(message: string, ...args: any[]): void {
    if (this.enabled) {
      console.warn(`[WARN] ${message}`, ...args);
    }
  }
}

// Usage example
const impl = new ExpandedImplementation({
  enableLogging: true,
  enableMetrics: true,
  timeout: 5000
});

impl.on('operationComplete', ({ id, duration }) => {
  console.log(`Operation ${id} took ${duration}ms`);
});

impl.on('operationError', ({ id, error }) => {
  console.error(`Operation ${id} failed:`, error);
});

const result = await impl.execute(async () => {
  // Your operation here
  return { status: 'success' };
});

console.log('Metrics:', impl.getMetrics());
```

### Features Added:
1. ⚡ Event-driven architecture
2. 📊 Built-in metrics and monitoring
3. 🕒 Timeout handling
4. 📝 Comprehensive logging
5. 🔒 Error boundaries
6. 🎯 Unique operation IDs
7. 📈 Performance tracking"""


def _is_blank(text: str) -> bool:
    return not text.strip(JS_WHITESPACE)


# ── Generators ──────────────────────────────────────────────


def generate_analysis(code: str) -> str:
    """Code quality "report" with line, language and function metrics."""
    if _is_blank(code):
        return NO_CODE_TO_ANALYZE
    return ANALYSIS_TEMPLATE.format(
        lines=code.count("\n") + 1,
        language=detect_language(code),
        functions=count_functions(code),
    )


def generate_code(prompt: str) -> str:
    """Boilerplate snippet headed by the prompt, echoed verbatim."""
    if _is_blank(prompt):
        return NO_PROMPT_TO_WRITE
    return f'// Generated based on: "{prompt}"\n' + GENERATED_CODE_BODY


def improve_code(code: str) -> str:
    if _is_blank(code):
        return NO_CODE_TO_IMPROVE
    return IMPROVED_CODE_TEMPLATE


def refactor_code(code: str) -> str:
    if _is_blank(code):
        return NO_CODE_TO_REFACTOR
    return REFACTORED_CODE_TEMPLATE


def debug_code(code: str) -> str:
    if _is_blank(code):
        return NO_CODE_TO_DEBUG
    return DEBUG_TEMPLATE


def expand_code(code: str, prompt: str = "") -> str:
    """Expanded implementation boilerplate.

    A non-blank prompt is echoed verbatim under the heading; the code itself
    only gates the empty-input warning.
    """
    if _is_blank(code):
        return NO_CODE_TO_EXPAND
    if _is_blank(prompt):
        return EXPANDED_HEADING + "\n" + EXPANDED_CODE_BODY
    return f'{EXPANDED_HEADING}\n\nRequested: "{prompt}"\n' + EXPANDED_CODE_BODY


# Generators keyed by action; each takes (code, prompt)
GENERATORS: Dict[ActionType, Callable[[str, str], str]] = {
    ActionType.ANALYZE: lambda code, prompt: generate_analysis(code),
    ActionType.WRITE: lambda code, prompt: generate_code(prompt),
    ActionType.IMPROVE: lambda code, prompt: improve_code(code),
    ActionType.REFACTOR: lambda code, prompt: refactor_code(code),
    ActionType.DEBUG: lambda code, prompt: debug_code(code),
    ActionType.EXPAND: expand_code,
}
