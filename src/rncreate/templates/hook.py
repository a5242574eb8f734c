"""Hook template: ``use<Name>`` returning a ``[value, setter]`` pair."""

from typing import List

from rncreate.core.models import FileDescriptor
from rncreate.naming import capitalize_first_letter


def build_hook_files(name: str) -> List[FileDescriptor]:
    """Files for ``src/hooks/<name>``."""
    capitalized = capitalize_first_letter(name)
    return [
        FileDescriptor(
            filename=f"{name}.tsx",
            message="Assembling reactive hook",
            content=f"""import {{ useState, useEffect }} from 'react';
import {{ Use{capitalized}Return }} from './{name}Types';

export function use{capitalized}(): Use{capitalized}Return {{
  const [state, setState] = useState<string>();

  useEffect(() => {{
    // hook logic goes here
    setState('Hello from the {name} hook!');
  }}, []);

  return [state, setState];
}}
""",
        ),
        FileDescriptor(
            filename=f"{name}Types.ts",
            message="Defining reactive types",
            content=f"""export type Use{capitalized}Return = [string | undefined, React.Dispatch<React.SetStateAction<string | undefined>>];
""",
        ),
        FileDescriptor(
            filename=f"{name}.test.ts",
            message="Writing hook test",
            content=f"""import {{ renderHook, act }} from '@testing-library/react-hooks';
import {{ use{capitalized} }} from './{name}';

describe('use{capitalized}', () => {{
  it('should initialize state and update correctly', () => {{
    const {{ result }} = renderHook(() => use{capitalized}());
    expect(result.current[0]).toBe(undefined);
    act(() => {{
      result.current[1]('Test');
    }});
    expect(result.current[0]).toBe('Test');
  }});
}});
""",
        ),
    ]
