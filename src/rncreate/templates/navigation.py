"""Navigation template: a native stack with a single screen route."""

from typing import List

from rncreate.core.models import FileDescriptor
from rncreate.naming import capitalize_first_letter


def build_navigation_files(name: str) -> List[FileDescriptor]:
    """The single file for ``src/navigation/<Name>Navigation.tsx``."""
    capitalized = capitalize_first_letter(name)
    return [
        FileDescriptor(
            filename=f"{capitalized}Navigation.tsx",
            message="Assembling stack navigator",
            content=f"""import React from 'react';
import {{ createNativeStackNavigator }} from '@react-navigation/native-stack';
import {{ {capitalized}Screen }} from '../screens/{name}';

const Stack = createNativeStackNavigator();

export function {capitalized}Navigation() {{
  return (
    <Stack.Navigator>
      <Stack.Screen name="{capitalized}" component={{{capitalized}Screen}} />
    </Stack.Navigator>
  );
}}
""",
        ),
    ]
