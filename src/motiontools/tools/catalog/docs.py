"""Markdown documentation pages keyed by topic slug."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocEntry:
    title: str
    description: str
    content: str
    related_topics: tuple[str, ...]
    next_steps: tuple[str, ...]


DEFAULT_SUGGESTIONS: tuple[str, ...] = ("getting-started", "animation-controls", "gestures")

DOCS_BASE_URL = "https://motion.dev/docs"

MOTION_DOCS: dict[str, DocEntry] = {
    "getting-started": DocEntry(
        title="Getting Started with Motion",
        description="Learn the basics of Motion animation library",
        content="""\
# Getting Started with Motion

Motion is an animation library with APIs for both JavaScript and React.

## Installation

```bash
npm install motion
```

## Basic Usage

### React
```jsx
import { motion } from "motion/react";

function App() {
  return (
    <motion.div
      initial={{ opacity: 0, y: 20 }}
      animate={{ opacity: 1, y: 0 }}
      transition={{ duration: 0.5 }}
    >
      Hello, Motion!
    </motion.div>
  );
}
```

### JavaScript
```javascript
import { animate } from "motion";

animate("#my-element", { x: 100, rotate: 180 });
```

## Core Concepts

1. **Declarative**: Describe the target state, not the steps
2. **Performant**: Optimized for smooth 60fps animations
3. **Flexible**: Works with any CSS property or custom values
4. **Gesture-ready**: Built-in support for drag, hover and tap
""",
        related_topics=("animation-basics", "installation", "first-animation"),
        next_steps=("animation-controls", "gestures", "layout-animations"),
    ),
    "animation-controls": DocEntry(
        title="Animation Controls",
        description="Learn how to control animations programmatically",
        content="""\
# Animation Controls

## useAnimationControls (React)

```jsx
import { motion, useAnimationControls } from "motion/react";

function ControlledAnimation() {
  const controls = useAnimationControls();

  return (
    <div>
      <motion.div animate={controls} />
      <button onClick={() => controls.start({ x: 100, transition: { duration: 1 } })}>
        Start Animation
      </button>
    </div>
  );
}
```

## JavaScript Controls

```javascript
import { animate } from "motion";

const animation = animate("#element", { x: 100 });

animation.pause();
animation.play();
animation.stop();
animation.finish();
```

## Chaining Animations

```jsx
controls.start({ x: 100 })
  .then(() => controls.start({ y: 100 }))
  .then(() => controls.start({ rotate: 180 }));
```
""",
        related_topics=("useAnimationControls", "animation-lifecycle", "chaining"),
        next_steps=("gestures", "timeline", "sequence"),
    ),
    "gestures": DocEntry(
        title="Gesture Animations",
        description="Interactive animations triggered by user gestures",
        content="""\
# Gesture Animations

## Hover Animations

```jsx
<motion.div
  whileHover={{ scale: 1.1, rotateZ: 5 }}
  transition={{ type: "spring", stiffness: 300 }}
>
  Hover me!
</motion.div>
```

## Tap Animations

```jsx
<motion.button whileTap={{ scale: 0.95 }} onTap={() => console.log("tapped")}>
  Tap me!
</motion.button>
```

## Drag Gestures

```jsx
<motion.div
  drag
  dragConstraints={{ left: 0, right: 300, top: 0, bottom: 300 }}
  whileDrag={{ scale: 1.2 }}
>
  Drag me around!
</motion.div>
```

## Gesture Event Handlers

- `onHoverStart` / `onHoverEnd`
- `onTapStart` / `onTap` / `onTapCancel`
- `onDragStart` / `onDrag` / `onDragEnd`
- `onPanStart` / `onPan` / `onPanEnd`
""",
        related_topics=("drag", "hover", "tap", "pan", "gestures"),
        next_steps=("drag-controls", "gesture-recognition", "touch-gestures"),
    ),
    "layout-animations": DocEntry(
        title="Layout Animations",
        description="Smooth animations when elements change size or position",
        content="""\
# Layout Animations

Layout animations animate an element whenever its size or position changes.

## Basic Layout Animation

```jsx
<motion.div layout>
  This element will animate when its layout changes
</motion.div>
```

## Shared Layout Animations

```jsx
<motion.div layoutId="shared-element">I'm in component A</motion.div>

// rendered elsewhere, later
<motion.div layoutId="shared-element">Now I'm in component B!</motion.div>
```

## Layout Groups

```jsx
import { LayoutGroup } from "motion/react";

<LayoutGroup>
  <motion.div layout>Item 1</motion.div>
  <motion.div layout>Item 2</motion.div>
</LayoutGroup>
```

## Performance Tips

- Use `layout="position"` for position-only changes
- Use `layout="size"` for size-only changes
- Avoid layout animations on many elements at once
""",
        related_topics=("layout", "shared-elements", "reorder", "responsive"),
        next_steps=("animate-presence", "reorder-group", "layout-projections"),
    ),
    "performance": DocEntry(
        title="Performance Optimization",
        description="Best practices for smooth and efficient animations",
        content="""\
# Performance Optimization

## Prefer Transform Properties

Transforms are GPU-accelerated and skip layout recalculation:

```jsx
// Good
<motion.div animate={{ x: 100, scale: 1.2, rotate: 45 }} />

// Avoid
<motion.div animate={{ left: 100, width: 200 }} />
```

## Reduce Motion for Accessibility

```jsx
import { useReducedMotion } from "motion/react";

function MyComponent() {
  const shouldReduceMotion = useReducedMotion();
  return <motion.div animate={{ x: shouldReduceMotion ? 0 : 100 }} />;
}
```

## LazyMotion for Bundle Size

```jsx
import { LazyMotion, domAnimation, m } from "motion/react";

<LazyMotion features={domAnimation}>
  <m.div animate={{ x: 100 }} />
</LazyMotion>
```
""",
        related_topics=("optimization", "gpu-acceleration", "reduced-motion", "bundle-size"),
        next_steps=("debugging", "profiling", "accessibility"),
    ),
    "scroll-animations": DocEntry(
        title="Scroll-Triggered Animations",
        description="Create animations that respond to scroll position",
        content="""\
# Scroll-Triggered Animations

## useScroll Hook

```jsx
import { motion, useScroll } from "motion/react";

function ScrollProgress() {
  const { scrollYProgress } = useScroll();
  return <motion.div style={{ scaleX: scrollYProgress }} className="progress-bar" />;
}
```

## whileInView Animation

```jsx
<motion.div
  initial={{ opacity: 0, y: 50 }}
  whileInView={{ opacity: 1, y: 0 }}
  viewport={{ once: true }}
>
  Animates when scrolled into view
</motion.div>
```

## JavaScript Scroll API

```javascript
import { scroll, inView, animate } from "motion";

scroll(animate(".progress-bar", { scaleX: [0, 1] }));

inView(".box", ({ target }) => {
  animate(target, { opacity: 1, y: 0 });
});
```
""",
        related_topics=("scroll", "parallax", "useScroll", "whileInView", "inView"),
        next_steps=("scroll-velocity", "intersection-observer", "scroll-snap"),
    ),
}
