"""View-stack display model: ANSI text helpers, themes, styles, messages and screens."""